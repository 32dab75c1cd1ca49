from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError


class AndroidConfig(BaseModel):
    """Android support policy: minimum runtime and acceptable emulator images."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_supported_runtime: str = Field("23", alias="minSupportedRuntime")
    supported_images: List[str] = Field(
        default_factory=lambda: ["google_apis", "default", "google_apis_playstore"],
        alias="supportedImages",
    )
    supported_architectures: List[str] = Field(
        default_factory=lambda: ["x86_64", "x86", "arm64-v8a"],
        alias="supportedArchitectures",
    )

    @field_validator("min_supported_runtime", mode="before")
    @classmethod
    def _runtime_is_api_level(cls, v: object) -> str:
        s = str(v).strip()
        if not s.isdigit():
            raise ValueError(f"minSupportedRuntime must be an API level number, got {v!r}")
        return s

    @field_validator("supported_images")
    @classmethod
    def _images_non_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("supportedImages must not be empty")
        return v


class PlatformConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    android: AndroidConfig = Field(default_factory=AndroidConfig)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "PlatformConfig":
        """Defaults, or a JSON override file such as ``{"android": {"minSupportedRuntime": "28"}}``."""
        if path is None:
            return cls()
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"cannot read config {path}: {e}") from e
        try:
            return cls.model_validate_json(raw)
        except ValidationError as ve:
            raise ConfigError(f"invalid config {path}: {ve.errors()}") from ve


@dataclass(frozen=True)
class Settings:
    """Immutable run configuration shared by probes and profiles."""

    platform: PlatformConfig = field(default_factory=PlatformConfig)
    environ: Optional[Mapping[str, str]] = None
    sdk_root_vars: Tuple[str, ...] = ("ANDROID_HOME", "ANDROID_SDK_ROOT")

    @property
    def android(self) -> AndroidConfig:
        return self.platform.android
