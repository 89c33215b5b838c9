from . import (
    crud_counter,
    crud_travel_pricing,
    crud_settings,
    crud_client,
    crud_team,
    crud_budget,
    crud_job,
)
