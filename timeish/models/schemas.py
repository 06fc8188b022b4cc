from pydantic import BaseModel, ConfigDict


class TimeParts(BaseModel):
    """Structured result of splitting a time string into hour and minute.

    Values are stored exactly as parsed; range checks belong to Timeish.
    """
    model_config = ConfigDict(frozen=True)

    hour: int
    minute: int
