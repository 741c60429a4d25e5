from infi.exceptools import InfiException, chain
from infi.pyutils.decorators import wraps
from logging import getLogger


# When __name__ is used, log function calls say "aixmount.errors" in the log file, this makes it look like there was an error
logger = getLogger("infi.aixmount.checker")

# pylint: disable=E1002
# InfiException inherits from Exception

class MountProviderError(InfiException):
    """Base Exception class for this module """
    pass


class UnsupportedPlatform(MountProviderError):
    pass


class CommandFailed(MountProviderError):
    pass


class ConfigurationError(MountProviderError):
    def __init__(self, resource_type, name, reason):
        super(ConfigurationError, self).__init__(resource_type, name, reason)

    def __str__(self):
        return "{} for {} {}".format(self.args[2], self.args[0], self.args[1])


class DestructiveActionBlocked(MountProviderError):
    def __init__(self, resource_type, name):
        super(DestructiveActionBlocked, self).__init__(resource_type, name)

    def __str__(self):
        return ("Cowardly refusing to remove {} {}. It will silently delete the LV and remove all data. "
                "Set 'force' parameter to 'Yes, I am sure' to force removal.".format(self.args[0], self.args[1]))


class DeviceIsBusy(MountProviderError):
    pass


class UnmountFailedDeviceIsBusy(DeviceIsBusy):
    def __init__(self, mount_point):
        super(UnmountFailedDeviceIsBusy, self).__init__(mount_point)

    def __str__(self):
        return "Cannot unmount filesystem {}, device is busy".format(self.args[0])


class NotMounted(MountProviderError):
    def __init__(self, mount_point):
        super(NotMounted, self).__init__("path {!r} is not being used by any mount".format(mount_point))


class AlreadyMounted(MountProviderError):
    def __init__(self, mount_point):
        super(AlreadyMounted, self).__init__("mount point {!r} is already mounted".format(mount_point))


def _decode(output):
    return output.decode("utf-8", "replace") if isinstance(output, bytes) else output


def check_for_execution_errors(func):
    """
    A decorator for catching errors from the `infi.execute` layer and converting them to `CommandFailed`.
    """
    from infi.execute import ExecutionError
    from sys import exc_info
    @wraps(func)
    def callable(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ExecutionError as error:
            msg = "{!r} failed with return code {}: {}".format(func.__name__, error.result.get_returncode(),
                                                               _decode(error.result.get_stderr()).strip())
            logger.error(msg)
            raise chain(CommandFailed(msg))
        except OSError as error:
            msg = "failed to execute command during {!r}: {}".format(func.__name__, error)
            logger.error(msg, exc_info=exc_info())
            raise chain(CommandFailed(msg))
    return callable
