import os
from pydantic import BaseModel, Field

class StepperConfig(BaseModel):
    """Configuration for logging and playback defaults."""

    # Logging settings
    log_level: str = "INFO"
    use_rich_logging: bool = True

    # Playback settings, in milliseconds
    default_interval_ms: int = Field(500, gt=0)
    min_interval_ms: int = Field(100, gt=0)
    max_interval_ms: int = Field(2000, gt=0)
    interval_step_ms: int = Field(100, gt=0, description="Slider granularity; also the modulus for valid intervals")

    @classmethod
    def from_env(cls) -> "StepperConfig":
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("GRAPH_STEPPER_LOG_LEVEL", "INFO"),
            use_rich_logging=os.getenv("GRAPH_STEPPER_RICH_LOGGING", "true").lower() == "true",
            default_interval_ms=int(os.getenv("GRAPH_STEPPER_INTERVAL_MS", "500")),
            min_interval_ms=int(os.getenv("GRAPH_STEPPER_MIN_INTERVAL_MS", "100")),
            max_interval_ms=int(os.getenv("GRAPH_STEPPER_MAX_INTERVAL_MS", "2000")),
            interval_step_ms=int(os.getenv("GRAPH_STEPPER_INTERVAL_STEP_MS", "100")),
        )

# Global config instance
config = StepperConfig.from_env()
