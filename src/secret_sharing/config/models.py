import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from secret_sharing.crypto.shamir import validate_parameters
from secret_sharing.share import ENCODINGS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SharingConfig:
    threshold: int = 3
    shares: int = 5
    encoding: str = "text"
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_file(cls, path: Path) -> "SharingConfig":
        return cls.from_dict(json.loads(Path(path).read_text()))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SharingConfig":
        if not data:
            return cls()
        base = cls()
        for key in data:
            if not hasattr(base, key):
                raise ValueError(f"Unknown config key '{key}'")
        try:
            threshold = int(data.get("threshold", base.threshold))
            shares = int(data.get("shares", base.shares))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"threshold and shares must be integers: {exc}") from exc
        validate_parameters(threshold, shares)
        encoding = str(data.get("encoding", base.encoding)).lower()
        if encoding not in ENCODINGS:
            raise ValueError(f"Unknown share encoding '{encoding}'")
        log_level = str(data.get("log_level", base.log_level)).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{log_level}'")
        json_logs = data.get("json_logs", base.json_logs)
        if not isinstance(json_logs, bool):
            raise ValueError("json_logs must be a boolean")
        return cls(
            threshold=threshold,
            shares=shares,
            encoding=encoding,
            log_level=log_level,
            json_logs=json_logs,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def override(self, **changes: Any) -> "SharingConfig":
        """Return a validated copy with every non-None value in ``changes`` applied."""
        merged = self.to_dict()
        merged.update({k: v for k, v in changes.items() if v is not None})
        return type(self).from_dict(merged)
