from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict

BUNDLED_CONFIG = Path(__file__).with_name("launch.yaml")


class LaunchSettings(BaseModel):
    # Terminal dollar values are fixed, so anything beyond these keys is refused.
    model_config = ConfigDict(extra="forbid")

    track_path: bool = True


def load_settings(config_path: Optional[Union[str, Path]] = None) -> LaunchSettings:
    if config_path is None:
        return LaunchSettings()

    cfg = yaml.safe_load(Path(config_path).read_text()) or {}
    return LaunchSettings.model_validate(cfg)
