"""Global configuration parsed from ~/.skillget/config.yaml."""

from __future__ import annotations

import yaml
from pydantic import BaseModel

from skillget.core import paths


class InstallConfig(BaseModel):
    global_dir: str = "~/.claude/skills"
    project_dir: str = ".claude/skills"


class GitConfig(BaseModel):
    timeout: int = 120
    depth: int = 1


class GlobalConfig(BaseModel):
    install: InstallConfig = InstallConfig()
    git: GitConfig = GitConfig()

    @classmethod
    def load(cls) -> GlobalConfig:
        path = paths.get_skillget_home() / paths.CONFIG_FILE
        if not path.exists():
            return cls()
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def save(self) -> None:
        home = paths.get_skillget_home()
        home.mkdir(parents=True, exist_ok=True)
        path = home / paths.CONFIG_FILE
        data = self.model_dump()
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
