from .travel_pricing import TravelPricingRule, PricingType
from .company_settings import CompanySettings
from .client import Client, ClientAddress, PersonType
from .team import Team, TeamStatus
from .job import Job, JobStatus
from .budget import Budget, BudgetStatus
from .counter import Counter

__all__ = [
    "TravelPricingRule",
    "PricingType",
    "CompanySettings",
    "Client",
    "ClientAddress",
    "PersonType",
    "Team",
    "TeamStatus",
    "Job",
    "JobStatus",
    "Budget",
    "BudgetStatus",
    "Counter",
]
