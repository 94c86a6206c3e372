class KeplerSourceError(Exception):
    """Base exception for the Kepler source."""

    pass


class EmptyReadingError(KeplerSourceError):
    """Raised when a sample carries no energy reading."""

    pass


class RegionNotFoundError(KeplerSourceError):
    """Raised when no region can be inferred from a node identifier."""

    pass


class PrometheusQueryError(KeplerSourceError):
    """Raised when a Prometheus query fails."""

    pass


class UnexpectedResultTypeError(PrometheusQueryError):
    """Raised when Prometheus answers with something other than a vector."""

    pass


class ProviderNotFoundError(KeplerSourceError):
    """Raised when the configured provider is not a supported one."""

    pass


class FetchError(KeplerSourceError):
    """Raised when a fetch cycle has to be aborted."""

    def __init__(self, phase: str, cause: Exception):
        self.phase = phase
        self.cause = cause
        super().__init__(f"kepler {phase} phase failed: {cause}")
