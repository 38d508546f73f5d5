"""
Base service class with common patterns for workflow integration
"""

from typing import Dict, Any
from abc import ABC, abstractmethod

from nuget_diagnostics.utils.logger import get_logger

logger = get_logger(__name__, "BaseService")


class BaseService(ABC):
    """
    Abstract base class for all diagnostic services.

    Provides:
    - Workflow integration (execute_node pattern)
    - Completion tracking
    - Error handling

    Subclasses MUST implement:
    - run(**kwargs): Public API
    - _execute(state): Workflow integration
    """

    def __init__(self, agent_name: str):
        """
        Initialize service.

        Args:
            agent_name: Service identifier (e.g., "probe", "report")
        """
        self.agent_name = agent_name

    @abstractmethod
    def run(self, **kwargs) -> Any:
        """
        Public API for direct service usage (outside workflow).

        Example:
            prober = ConnectivityProber()
            result = prober.run(timeout=5)
        """
        pass

    @abstractmethod
    def _execute(self, state: Dict[str, Any]) -> Dict[str, Any]:
        """
        Internal execution logic for workflow integration.

        Should read inputs from state, call self.run() and store the result
        back in state.

        Args:
            state: Current workflow state

        Returns:
            Updated workflow state
        """
        pass

    def execute_node(self, state: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute service as a workflow node.

        Don't override this method in subclasses.

        Handles:
        - Skip if already completed
        - Skip if previous error
        - Call _execute()
        - Track completion
        - Handle errors

        Args:
            state: Current workflow state

        Returns:
            Updated workflow state
        """
        correlation_id = state.get("correlation_id")

        completed_tools = state.get("completed_tools", [])
        if self.agent_name in completed_tools:
            logger.debug(
                f"{self._format_agent_name()} already completed, skipping",
                correlation_id=correlation_id
            )
            return state

        if state.get("error"):
            logger.debug(
                f"Skipping {self.agent_name} due to previous error: {state['error']}",
                correlation_id=correlation_id
            )
            return state

        try:
            state = self._execute(state)

            if not state.get("error"):
                completed_tools = state.get("completed_tools", [])
                if self.agent_name not in completed_tools:
                    completed_tools.append(self.agent_name)
                    state["completed_tools"] = completed_tools

                logger.debug(
                    f"{self._format_agent_name()} completed successfully",
                    correlation_id=correlation_id
                )

        except Exception as e:
            error_msg = f"{self._format_agent_name()} failed: {e}"
            state["error"] = error_msg

            if isinstance(e, (RuntimeError, FileNotFoundError, ValueError)):
                logger.error(error_msg, correlation_id=correlation_id)
            else:
                logger.exception(error_msg, correlation_id=correlation_id)

        return state

    def _format_agent_name(self) -> str:
        """
        Format agent name for display in logs.

        Returns:
            Formatted agent name (e.g., "inspect_config" -> "Inspect Config")
        """
        return self.agent_name.replace('_', ' ').title()
