class PodRacerError(Exception):
    """Base for all podracer exceptions."""

    pass


# High-level families
class ProtocolError(PodRacerError):
    """Malformed referee input."""

    pass


class EndOfInput(ProtocolError):
    """The referee closed the input stream."""

    pass


class ConfigurationError(PodRacerError):
    """Invalid runtime configuration."""

    pass


class PlannerError(PodRacerError):
    """Invalid use of the trajectory planner."""

    pass
