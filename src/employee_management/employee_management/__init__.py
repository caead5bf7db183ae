"""Employee Management System package.

This package is organized by feature modules (departments, employees,
attendance, reports, ...) with a thin Flask controller layer on top of
service/repository layers.
"""

from .main import create_app

__all__ = ["create_app"]
