from abc import ABC, abstractmethod

from resume_analyzer.analysis.models import AnalysisRequest


class BaseInferenceClient(ABC):
    """Contract for provider-specific inference clients."""

    @property
    def is_initialized(self) -> bool:
        """Whether the client holds credentials and may issue requests."""
        return True

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        request: AnalysisRequest,
    ) -> str:
        """Send one request and return the provider reply as plain text.

        Exactly one outbound call per invocation; no retries.

        Raises:
            NotInitializedError: if called on an uninitialized client.
            RemoteInvocationError: on transport or provider failure.
        """
