"""Contains exceptions raised when reconciling application configuration and inbound events."""


class ConfigurationError(Exception):
    """Base class for fatal configuration errors that abort a run."""

    pass


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (command line option {cli_name}, environment variable {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class RequiredPayloadFieldError(ConfigurationError):
    """Raised when an inbound event payload lacks a field the run cannot proceed without."""

    def __init__(self, field: str) -> None:
        """Initializes the exception with the dotted path of the missing field."""
        super().__init__(f"Required event payload field is not provided: {field}")
        self.field = field


class UnsupportedEventError(ConfigurationError):
    """Raised when the application is triggered by an event it does not handle."""

    def __init__(self, event_name: str | None) -> None:
        """Initializes the exception with the unsupported event name."""
        super().__init__(f"Unsupported event: {event_name!r}")
        self.event_name = event_name
