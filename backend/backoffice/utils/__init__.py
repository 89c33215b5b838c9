from .errors import error_response
from .addresses import normalize_address, join_address_parts
