"""GET /v1/rates - Offered contract durations and their annual rates"""

from fastapi import APIRouter

from contract_ledger.api.v1.schemas import DurationOption, RatesResponse
from contract_ledger.domain.rates import MIN_CAPITAL, duration_options

router = APIRouter()


@router.get("/rates", response_model=RatesResponse)
async def get_rates():
    return RatesResponse(
        min_capital=MIN_CAPITAL,
        durations=[DurationOption(years=years, rate_percent=rate) for years, rate in duration_options()],
    )
