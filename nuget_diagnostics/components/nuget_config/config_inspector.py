"""
NuGet Config Inspector - Checks local and global NuGet configuration files.
Missing files are a normal outcome, not an error.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union, Dict, Any

from nuget_diagnostics.components.base_service import BaseService
from nuget_diagnostics.config import config
from nuget_diagnostics.constants import NUGET_ORG_DOMAIN, GLOBAL_CONFIG_PARTS, TOOL_INSPECT_CONFIG
from nuget_diagnostics.exceptions import ConfigInspectionError
from nuget_diagnostics.utils.logger import get_logger

logger = get_logger(__name__, "NuGetConfigInspector")


@dataclass(frozen=True)
class NuGetConfigState:
    """What was found on disk"""
    local_path: str
    local_exists: bool
    local_has_source: Optional[bool]
    global_path: str
    global_exists: bool


class NuGetConfigInspector(BaseService):
    """Looks for nuget.config and whether it references nuget.org."""

    def __init__(self):
        super().__init__(agent_name=TOOL_INSPECT_CONFIG)

    def run(
        self,
        config_path: Optional[Union[str, Path]] = None,
        home: Optional[Union[str, Path]] = None,
        correlation_id: Optional[str] = None
    ) -> NuGetConfigState:
        """
        Inspect NuGet configuration.

        Args:
            config_path: Local config file (default: NUGET_CONFIG_FILE, relative to cwd)
            home: Home directory holding the global config (default: user home)
            correlation_id: Request correlation ID

        Returns:
            NuGetConfigState
        """
        local_path = Path(config_path or config.NUGET_CONFIG_FILE)
        global_path = Path(home or Path.home()).joinpath(*GLOBAL_CONFIG_PARTS)

        local_exists = local_path.is_file()
        local_has_source = None
        if local_exists:
            try:
                local_has_source = NUGET_ORG_DOMAIN in self._read_config(local_path)
            except ConfigInspectionError as e:
                logger.warning(str(e), correlation_id=correlation_id)
        else:
            logger.debug(f"No local NuGet config at {local_path}", correlation_id=correlation_id)

        result = NuGetConfigState(
            local_path=os.fspath(local_path),
            local_exists=local_exists,
            local_has_source=local_has_source,
            global_path=os.fspath(global_path),
            global_exists=global_path.is_file(),
        )

        logger.debug(
            f"Config inspection: local={result.local_exists}, "
            f"source={result.local_has_source}, global={result.global_exists}",
            correlation_id=correlation_id
        )
        return result

    def _execute(self, state: Dict[str, Any]) -> Dict[str, Any]:
        if not state.get("check_config", True):
            state["nuget_config"] = None
            return state

        state["nuget_config"] = self.run(
            config_path=state.get("config_path"),
            correlation_id=state.get("correlation_id")
        )
        return state

    def _read_config(self, path: Path) -> str:
        """
        Read a config file as text.

        Raises:
            ConfigInspectionError: If the file cannot be read
        """
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ConfigInspectionError(f"Failed to read NuGet config {path}: {e}") from e
