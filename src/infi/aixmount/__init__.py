'''

## Getting Started

Describe the mount entry you want with an `infi.aixmount.base.resource.MountResource`, and get a provider for it:

    #!python
    from infi.aixmount import get_mount_provider
    from infi.aixmount.base.resource import MountResource
    resource = MountResource("/data", ensure="mounted", fstype="jfs2", size="1000000", volume="datavg", atboot=True)
    provider = get_mount_provider(resource)

`apply` converges the system to the resource and returns the actions it took:

    #!python
    provider.apply()
    ['created', 'mounted']


### Inspecting the current state

The state is queried from `lsfs` on every call, nothing is cached:

    #!python
    provider.get_info()
    {'name': '/data', 'device': '/dev/fslv00', 'fstype': 'jfs2', 'size': '1000000', 'options': 'rw', 'atboot': True, ...}
    provider.list_all()

NFS mounts report their device as `host:path`:

    #!python
    get_mount_provider(MountResource("/mnt/nfs")).get_property("device")
    'nfsserver:/export/data'


### Building commands without running them

    #!python
    provider.addcmd()
    ['/usr/sbin/crfs', '-m', '/data', '-A', 'yes', '-v', 'jfs2', '-a', 'size=1000000', '-g', 'datavg']
    provider.modifycmd({"options": "rw,cio"})
    ['/usr/sbin/chfs', '-a', 'options=rw,cio', '/data']


### Removing mount points

Removing a local mount point on AIX removes its logical volume, and all the data on it. Unless the resource
has `force="Yes, I am sure"`, `delete` raises `infi.aixmount.errors.DestructiveActionBlocked` for them.
NFS mount points are removed without confirmation.

'''

__all__ = ['get_mount_provider', 'is_platform_supported']

from logging import getLogger
logger = getLogger(__name__)


def is_platform_supported():
    from infi.os_info import get_platform_string
    return get_platform_string().split('-')[0] == 'aix'


def get_mount_provider(resource, check_platform=False):
    """returns a `infi.aixmount.aix.provider.AixMountProvider` for the `infi.aixmount.base.resource.MountResource`"""
    from .aix.provider import AixMountProvider
    if check_platform and not is_platform_supported():
        from .errors import UnsupportedPlatform
        msg = "mount provider is supported only on AIX"
        logger.error(msg)
        raise UnsupportedPlatform(msg)
    return AixMountProvider(resource)
