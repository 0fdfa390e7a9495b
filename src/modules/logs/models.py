from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from modules.logs.errors import ERRORS_BY_KIND, ErrorKind


class QueryConfig(BaseModel):
    """
    Options collected for one invocation: command line flags first, prompts fill the rest.
    """
    model_config = ConfigDict(frozen=True)

    profile: str | None = Field(None, description="AWS CLI profile; None lets the CLI resolve its default.")
    service: str | None = Field(None, description="Key of the selected service in the registry.")
    log_group: str | None = None
    start_time: int | str | None = None
    end_time: int | str | None = None
    filter_pattern: str | None = None

    def missing(self, keys: list[str]) -> list[str]:
        """Keys from `keys` that have no value yet."""
        return [key for key in keys if getattr(self, key) is None]


class LogQuery(BaseModel):
    """
    Normalized parameters of a filter-log-events call. Times are epoch seconds.
    """
    model_config = ConfigDict(frozen=True)

    log_group: str
    start_time: int
    end_time: int
    filter_pattern: str


class QueryResult(BaseModel):
    """Outcome of a query: the parsed events or a typed error."""

    success: bool
    events: Any = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls, events: Any) -> "QueryResult":
        return cls(success=True, events=events)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "QueryResult":
        return cls(success=False, error_kind=kind, error_message=message)

    def raise_for_error(self) -> None:
        """Raise the exception matching `error_kind` if the query failed."""
        if self.success:
            return
        raise ERRORS_BY_KIND[self.error_kind](self.error_message)


class ServiceParam(BaseModel):
    key: str
    prompt: str
    type: Literal["string", "time"] = "string"
    allow_empty: bool = False


class ServiceConfig(BaseModel):
    """A query type the CLI exposes as a flag."""
    description: str
    params: list[ServiceParam]

    @property
    def keys(self) -> list[str]:
        return [param.key for param in self.params]
