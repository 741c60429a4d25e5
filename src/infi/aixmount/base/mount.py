"""
This is the mount lifecycle layer of the mount provider.

Example - checking and changing mount state:

    #!python
    >>> from infi.aixmount.aix.mount import AixMountManager
    >>> mgr = AixMountManager()
    >>> mgr.is_mount_point_in_use('/home')
    True
    >>> mgr.unmount('/home')
    >>> mgr.is_mount_point_in_use('/home')
    False

"""

from infi.pyutils.lazy import cached_method


def _normalize(path):
    return path.rstrip('/') or '/'


class MountManager(object):
    """Provides access to mount-related operations"""

    def is_mount_point_in_use(self, mount_point):
        """Returns True if the mount point is mounted"""
        mounted = [_normalize(path) for path in self.get_mounted_mount_points()]
        return _normalize(mount_point) in mounted

    #############################
    # Platform Specific Methods #
    #############################

    @cached_method
    def get_mounted_mount_points(self):  # pragma: no cover
        """Returns a list of the mount points that are currently mounted"""
        raise NotImplementedError()

    def mount(self, mount_point):  # pragma: no cover
        """
        Mounts a filesystem that is already defined in the system's filesystem table.

        Raises `infi.aixmount.errors.AlreadyMounted` if the mount point is already mounted
        """
        raise NotImplementedError()

    def unmount(self, mount_point):  # pragma: no cover
        """
        Unmount the filesystem from the mount point.

        Raises `infi.aixmount.errors.NotMounted` if the mount point argument is not a mounted path
        """
        raise NotImplementedError()
