"""Fixed sample data for demo seeding."""
from __future__ import annotations

from decimal import Decimal

from ..core.enums import Role

# name, description, manager, salary range
DEPARTMENTS: list[tuple[str, str, str, tuple[Decimal, Decimal]]] = [
    ("Human Resources", "Manages employee relations, recruitment, and benefits", "Sarah Johnson",
     (Decimal("45000"), Decimal("120000"))),
    ("Information Technology", "Handles all technology infrastructure and software development", "Michael Chen",
     (Decimal("60000"), Decimal("180000"))),
    ("Finance", "Manages financial planning, accounting, and budgeting", "Robert Williams",
     (Decimal("50000"), Decimal("150000"))),
    ("Marketing", "Responsible for brand management and customer acquisition", "Emily Davis",
     (Decimal("40000"), Decimal("130000"))),
    ("Sales", "Handles customer relationships and revenue generation", "David Martinez",
     (Decimal("35000"), Decimal("200000"))),
    ("Operations", "Manages day-to-day business operations and logistics", "Lisa Anderson",
     (Decimal("45000"), Decimal("140000"))),
    ("Customer Support", "Provides customer service and technical support", "James Wilson",
     (Decimal("35000"), Decimal("80000"))),
    ("Research & Development", "Conducts product research and innovation", "Dr. Jennifer Taylor",
     (Decimal("70000"), Decimal("200000"))),
    ("Legal", "Handles legal compliance and contract management", "Attorney Mark Brown",
     (Decimal("80000"), Decimal("250000"))),
    ("Quality Assurance", "Ensures product and service quality standards", "Patricia Garcia",
     (Decimal("50000"), Decimal("120000"))),
]

FIRST_NAMES = [
    "John", "Jane", "Michael", "Sarah", "David", "Emily", "Robert", "Lisa", "James", "Jennifer",
    "William", "Patricia", "Richard", "Linda", "Charles", "Barbara", "Joseph", "Elizabeth", "Thomas", "Jessica",
    "Christopher", "Susan", "Daniel", "Karen", "Paul", "Nancy", "Mark", "Betty", "Donald", "Helen",
    "Steven", "Sandra", "Andrew", "Donna", "Joshua", "Carol", "Kenneth", "Ruth", "Kevin", "Sharon",
    "Brian", "Michelle", "George", "Laura", "Timothy", "Ronald", "Kimberly", "Jason", "Deborah", "Amy",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson",
    "Walker", "Young", "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
    "Green", "Adams", "Nelson", "Baker", "Hall", "Rivera", "Campbell", "Mitchell", "Carter", "Roberts",
]

POSITIONS = [
    "Software Engineer", "Senior Software Engineer", "Lead Developer", "Project Manager", "Product Manager",
    "Business Analyst", "Data Analyst", "UX Designer", "UI Designer", "DevOps Engineer",
    "System Administrator", "Database Administrator", "Network Engineer", "Security Specialist", "QA Engineer",
    "HR Manager", "HR Specialist", "Recruiter", "Training Coordinator", "Benefits Administrator",
    "Financial Analyst", "Accountant", "Controller", "Budget Analyst", "Tax Specialist",
    "Marketing Manager", "Marketing Specialist", "Content Creator", "Social Media Manager", "Brand Manager",
    "Sales Manager", "Sales Representative", "Account Executive", "Business Development", "Customer Success",
    "Operations Manager", "Operations Analyst", "Supply Chain Manager", "Logistics Coordinator", "Process Improvement",
    "Customer Support Manager", "Support Specialist", "Technical Support", "Help Desk", "Customer Success Manager",
    "Research Scientist", "Research Engineer", "Innovation Manager", "Patent Attorney", "Legal Counsel",
    "Quality Manager", "Quality Engineer", "Compliance Officer", "Auditor", "Risk Manager",
]

STREETS = ["Main St", "Oak Ave", "Pine Rd", "Elm St", "Cedar Blvd", "Maple Dr", "First St", "Second Ave"]
CITIES = [
    ("New York", "NY"), ("Los Angeles", "CA"), ("Chicago", "IL"), ("Houston", "TX"),
    ("Phoenix", "AZ"), ("Philadelphia", "PA"), ("San Antonio", "TX"), ("San Diego", "CA"),
]

ATTENDANCE_NOTES = [
    "Late due to traffic",
    "Left early for doctor appointment",
    "Worked from home in the morning",
    "Overtime for project deadline",
    "Team meeting ran late",
    "Client call extended hours",
    "Training session",
    "Conference attendance",
]

GOALS = [
    "Improve technical skills in cloud technologies",
    "Enhance leadership and team management abilities",
    "Complete professional certification program",
    "Increase project delivery efficiency by 20%",
    "Develop better communication skills",
    "Learn new programming languages",
    "Improve customer satisfaction scores",
    "Reduce project costs by 15%",
]

_STEADY_ACHIEVEMENTS = [
    "Completed assigned tasks",
    "Participated in team meetings",
    "Met basic job requirements",
    "Showed improvement in recent projects",
    "Contributed to team goals",
]

# (minimum score, comment, achievements), checked from the top
SCORE_BANDS: list[tuple[int, str, list[str]]] = [
    (90, "Exceptional performance with outstanding results and leadership qualities.", [
        "Led successful project delivery ahead of schedule",
        "Mentored 5 junior team members",
        "Implemented cost-saving initiative saving $50K",
        "Received customer excellence award",
        "Completed advanced certification program",
    ]),
    (80, "Strong performance with consistent delivery and positive impact.", [
        "Completed major project on time",
        "Improved team productivity by 15%",
        "Resolved critical system issue",
        "Trained new team members",
        "Contributed to process improvement",
    ]),
    (70, "Good performance with room for improvement in specific areas.", _STEADY_ACHIEVEMENTS),
    (0, "Performance below expectations, requires improvement and support.", _STEADY_ACHIEVEMENTS),
]

DEMO_USERS: list[tuple[str, str, str, Role]] = [
    ("admin", "admin@ems.com", "admin123", Role.ADMIN),
    ("hr_manager", "hr@ems.com", "hr123", Role.HR),
    ("manager", "manager@ems.com", "manager123", Role.MANAGER),
]
