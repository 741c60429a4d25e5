from ..base import mount
from .utils import execute_command, get_output
from infi.aixmount.errors import AlreadyMounted, NotMounted, UnmountFailedDeviceIsBusy, check_for_execution_errors
from infi.pyutils.lazy import cached_method, clear_cache
from infi.exceptools import chain
from logging import getLogger

logger = getLogger(__name__)


class UnixMountManager(mount.MountManager):
    """A wrapper for the mount and umount commands"""
    mount_command = "mount"
    umount_command = "umount"

    @cached_method
    @check_for_execution_errors
    def get_mounted_mount_points(self):
        output = get_output(execute_command([self.mount_command]))
        return self._parse_mount_output(output)

    @check_for_execution_errors
    def mount(self, mount_point):
        if self.is_mount_point_in_use(mount_point):
            raise AlreadyMounted(mount_point)
        try:
            execute_command([self.mount_command, mount_point])
        finally:
            clear_cache(self)

    @check_for_execution_errors
    def unmount(self, mount_point):
        from infi.execute import ExecutionError
        if not self.is_mount_point_in_use(mount_point):
            raise NotMounted(mount_point)
        try:
            execute_command([self.umount_command, mount_point])
        except ExecutionError:
            logger.exception("failed to unmount {}".format(mount_point))
            raise chain(UnmountFailedDeviceIsBusy(mount_point))
        finally:
            clear_cache(self)

    def _parse_mount_output(self, output):
        raise NotImplementedError()
