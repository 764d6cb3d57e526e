"""Parsed ``Link`` header entry."""

from pydantic import BaseModel, ConfigDict


class LinkEntry(BaseModel):
    """One ``Link`` header line: the target URL and its parameters in order."""

    url: str
    params: tuple[tuple[str, str], ...] = ()

    def has_param(self, key: str, value: str) -> bool:
        return any(k == key and v == value for k, v in self.params)

    @property
    def rel(self) -> str | None:
        """Value of the first ``rel`` parameter, if any."""
        for key, value in self.params:
            if key == "rel":
                return value
        return None

    model_config = ConfigDict(frozen=True)
