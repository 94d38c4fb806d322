from pydantic import BaseModel, ConfigDict

class LaunchParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    uses_market_testing: bool = False
    has_positive_rating: bool = False  # only meaningful with market testing
    successful_launch: bool = False
    modest_launch: bool = False
    failed_launch: bool = False  # carried along, never branched on
