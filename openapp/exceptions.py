"""
Custom exceptions for the application.

Every error carries the exit code the CLI should terminate with.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    exit_code: int = 3


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    exit_code = 1


class ConfigFileError(ConfigurationError):
    """Exception raised when the user's config file cannot be read or parsed."""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self) -> str:
        return self.description


class LauncherError(BaseAppError):
    """Exception raised for application resolution and launching errors."""

    exit_code = 2


class NotFoundError(LauncherError):
    """Exception raised when an application name cannot be resolved."""

    def __init__(self, app: str):
        super().__init__(f"command not found: {app}")
        self.app = app


class MissingFileManagerError(LauncherError):
    """Exception raised when the file manager used for revealing cannot be resolved."""

    def __init__(self, file_manager: str):
        super().__init__(f"file manager not found: {file_manager}")
        self.file_manager = file_manager


class PlatformError(LauncherError):
    """Exception raised when an OS-level call reports an error code."""

    def __init__(self, code: int, description: str):
        super().__init__(description)
        self.code = code
        self.description = description

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Only the low byte reaches the shell; never let a failure look like 0
        if self.code & 0xFF == 0:
            return LauncherError.exit_code
        return self.code

    def __str__(self) -> str:
        return self.description


class UnknownError(LauncherError):
    """Exception wrapping an unexpected underlying failure."""

    exit_code = 3

    def __init__(self, underlying: BaseException):
        super().__init__(str(underlying))
        self.underlying = underlying


# Launch Services status codes (OSStatus values from LSInfo.h)
kLSAppInTrashErr = -10660
kLSNotAnApplicationErr = -10811
kLSDataUnavailableErr = -10813
kLSApplicationNotFoundErr = -10814
kLSDataErr = -10817
kLSLaunchInProgressErr = -10818
kLSServerCommunicationErr = -10822
kLSCannotSetInfoErr = -10823
kLSIncompatibleSystemVersionErr = -10825
kLSNoLaunchPermissionErr = -10826
kLSNoExecutableErr = -10827
kLSNoClassicEnvironmentErr = -10828
kLSMultipleSessionsNotSupportedErr = -10829

LAUNCH_SERVICES_MESSAGES: dict[int, str] = {
    kLSAppInTrashErr: "'{app}' is in the Trash.",
    kLSNotAnApplicationErr: "'{app}' is not an app.",
    kLSDataUnavailableErr: "Data of the desired type is not available.",
    kLSApplicationNotFoundErr: "Unknown app '{app}'.",
    kLSDataErr: "Improper data structure.",
    kLSLaunchInProgressErr: "'{app}' is already being launched.",
    kLSServerCommunicationErr: "Can't talk to the Launch Services database.",
    kLSCannotSetInfoErr: "The system can't hide the filename extension.",
    kLSIncompatibleSystemVersionErr: "'{app}' can't run on this version of macOS.",
    kLSNoLaunchPermissionErr: "You don't have permission to launch '{app}'.",
    kLSNoExecutableErr: "'{app}' is corrupted and can't be run.",
    kLSNoClassicEnvironmentErr: "Classic app '{app}' can no longer be run.",
    kLSMultipleSessionsNotSupportedErr: "Another user is already running '{app}'.",
}


class LaunchServicesError(PlatformError):
    """Exception raised when a Launch Services call returns an error status."""

    def __init__(self, status: int, app: str):
        template = LAUNCH_SERVICES_MESSAGES.get(
            status, "An unknown error with '{app}' has occurred."
        )
        super().__init__(status, template.format(app=app))
        self.status = status
        self.app = app
