from __future__ import annotations
from dataclasses import dataclass


@dataclass
class ProductConfig:
    snapshot: bool = False  # copy every source into a tuple at construction
    check_stable: bool = True  # fail fast if a source changes length while iterating
    verbose: bool = False
    log_prefix: str = "[Product]"

    def validate(self) -> None:
        for name in ("snapshot", "check_stable", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be a bool, got {value!r}")
        if not self.log_prefix:
            raise ValueError("log_prefix must not be empty.")
