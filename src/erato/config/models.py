from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from erato.algorithms.miller_rabin import DEFAULT_ROUNDS

# Config models map the YAML registry file to typed structures.


class AlgorithmDecl(BaseModel):
    # One registry entry; declaration order is registration order.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["sieve", "miller_rabin", "zeta"]
    rounds: int = Field(default=DEFAULT_ROUNDS, ge=1)

    @model_validator(mode="after")
    def _rounds_only_for_miller_rabin(self) -> AlgorithmDecl:
        # rounds applies to miller_rabin only.
        if "rounds" in self.model_fields_set and self.kind != "miller_rabin":
            raise ValueError(f"rounds is only valid for miller_rabin, not {self.kind}")
        return self


class LoggingConfig(BaseModel):
    # Sink selector for registry lifecycle messages.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class RegistryConfig(BaseModel):
    # Top-level typed view of a registry config file.
    model_config = ConfigDict(extra="forbid")
    version: int
    algorithms: list[AlgorithmDecl] = Field(min_length=1)
    logging: LoggingConfig | None = None
