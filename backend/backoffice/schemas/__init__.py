from .travel_pricing import TravelPricingRuleCreate, TravelPricingRuleRead
from .distance import DistanceCalculateRequest, DistanceQuote, GeocodeRequest, GeocodedAddress
from .company_settings import CompanySettingsUpdate, CompanySettingsRead
from .client import ClientAddressIn, ClientAddressRead, ClientCreate, ClientUpdate, ClientRead
from .team import TeamCreate, TeamUpdate, TeamRead
from .budget import (
    ServiceItem,
    BudgetCreate,
    BudgetUpdate,
    BudgetRead,
    BudgetSummary,
    BudgetConvertRequest,
    PublicLinkRead,
    BudgetApproveRequest,
    BudgetRejectRequest,
)
from .job import JobRead, BudgetConversionRead
from .operations import OperationsLogin, OperationsPanel, JobStatusUpdate
from .common import DataResponse
