"""
Mount management for AIX. Mount points are defined with crfs, changed with chfs/chnfsmnt, listed with lsfs
and removed with rmfs.

rough flow of what the provider issues, for a local and an NFS mount:

    lsfs -c /data                                       # query, colon-delimited output
    crfs -m /data -A yes -v jfs2 -a size=1000000 -g datavg
    chfs -a options=rw,cio /data                        # local attribute change
    chnfsmnt -f /mnt/nfs -h nfsserver -d /export/data   # chfs can't change the remote directory of NFS mounts
    rmfs /data                                          # removes the LV too, requires force for local mounts
"""

from ..base.provider import ObjectProvider, AttributeMapping
from ..errors import DestructiveActionBlocked, check_for_execution_errors
from logging import getLogger

logger = getLogger(__name__)

FORCE_CONFIRMATION = "yes, i am sure"
NFS_ARGUMENT_REMAP = {"-n": "-h", "-V": "-m"}


def is_remote_device(device):
    return ':' in device


def decode_automount(value):
    return value.lower() == "yes"


def decode_options(value):
    if not value:
        raise ValueError("Parameter options must not be empty")
    return value


def encode_atboot(value):
    return ["-A", "yes" if value else "no"]


def encode_device(value):
    if is_remote_device(value):
        nodename, _, device = value.partition(':')
        return ["-n", nodename, "-d", device]
    return ["-d", value]


def encode_nodename(value):
    # nodename is passed as part of the device
    return []


def encode_options(value):
    return ["-a", "options={}".format(value)]


def encode_fstype(value):
    return ["-v", value]


def encode_size(value):
    return ["-a", "size={}".format(value)]


def encode_volume(value):
    return ["-g", value]


def merge_device_and_nodename(objectinfo):
    """lsfs reports remote mounts with the host in a separate column; fold it into the device as host:path"""
    nodename = objectinfo.get("nodename")
    device = objectinfo.get("device")
    if nodename and device:
        objectinfo["device"] = "{}:{}".format(nodename, device)
    return objectinfo


def remap_nfs_arguments(args):
    return [NFS_ARGUMENT_REMAP.get(arg, arg) for arg in args]


class AixMountProvider(ObjectProvider):
    list_command = "/usr/sbin/lsfs"
    add_command = "/usr/sbin/crfs"
    modify_command = "/usr/sbin/chfs"
    delete_command = "/usr/sbin/rmfs"
    nfs_modify_command = "/usr/sbin/chnfsmnt"

    attribute_mapping = (
        AttributeMapping("automount", "atboot", encode_atboot, decode_automount),
        AttributeMapping("device", "device", encode_device),
        AttributeMapping("nodename", "nodename", encode_nodename),
        AttributeMapping("vfs", "fstype", encode_fstype),
        AttributeMapping("options", "options", encode_options, decode_options),
        AttributeMapping("size", "size", encode_size),
        AttributeMapping("volume", "volume", encode_volume),
    )

    def __init__(self, resource, mount_manager=None):
        super(AixMountProvider, self).__init__(resource)
        self._mount_manager = mount_manager

    def get_mount_manager(self):
        if self._mount_manager is None:
            from .mount import AixMountManager
            self._mount_manager = AixMountManager()
        return self._mount_manager

    def lscmd(self, name=None):
        # -c: Specifies that the output should be in colon format.
        return [self.list_command, "-c", name or self.resource.name]

    def lsallcmd(self):
        return [self.list_command, "-c"]

    def addcmd(self):
        return [self.add_command, "-m", self.resource.name] + self.hash2args(self.resource.to_dict())

    def modifycmd(self, changes):
        changes = dict(changes)
        device = changes.get("device")
        fstype = changes.get("fstype")
        if device and is_remote_device(device):
            args = remap_nfs_arguments(self.hash2args(changes))
            return [self.nfs_modify_command, "-f", self.resource.name] + args
        if fstype and fstype.startswith("nfs"):
            objectinfo = self.get_info()
            if objectinfo is None:
                raise self._configuration_error("Can not convert a non-existing mount point to NFS")
            if objectinfo.get("device"):
                changes["device"] = objectinfo["device"]
            args = remap_nfs_arguments(self.hash2args(changes))
            return [self.nfs_modify_command, "-d", self.resource.name] + args
        if fstype:
            raise self._configuration_error("Can not change the fstype in AIX")
        args = self.hash2args(changes)
        if not args:
            return None
        return [self.modify_command] + args + [self.resource.name]

    def deletecmd(self):
        return [self.delete_command, self.resource.name]

    def finalize_attributes(self, objectinfo):
        return merge_device_and_nodename(objectinfo)

    def is_protected(self, objectinfo):
        fstype = objectinfo.get("fstype")
        device = objectinfo.get("device")
        return bool((fstype and not fstype.startswith("nfs")) or (device and not is_remote_device(device)))

    def is_force_confirmed(self):
        force = self.resource.force
        return bool(force) and force.lower() == FORCE_CONFIRMATION

    def delete(self):
        """Removes the mount point. Local mounts are removed together with their logical volume, so removing them
        requires the resource's force to be set to 'Yes, I am sure'"""
        objectinfo = self.get_info()
        if objectinfo is None:
            logger.info("{} {} already absent".format(self.resource.resource_type, self.resource.name))
            return None
        if self.is_protected(objectinfo) and not self.is_force_confirmed():
            raise DestructiveActionBlocked(self.resource.resource_type, self.resource.name)
        if self.is_mounted():
            self.unmount()
        return super(AixMountProvider, self).delete()

    def destroy(self):
        return self.delete()

    # dump and pass are fstab fields, AIX doesn't have them

    def get_dump(self):
        return 0

    def set_dump(self, value):
        logger.debug("'dump' parameter is ignored in this provider for {} {}".format(self.resource.resource_type,
                                                                                    self.resource.name))
        return 0

    def get_pass(self):
        return 0

    def set_pass(self, value):
        logger.debug("'pass' parameter is ignored in this provider for {} {}".format(self.resource.resource_type,
                                                                                    self.resource.name))
        return 0

    def get_property(self, prop):
        if prop == "dump":
            return self.get_dump()
        if prop == "pass":
            return self.get_pass()
        return super(AixMountProvider, self).get_property(prop)

    @check_for_execution_errors
    def is_mounted(self):
        return self.get_mount_manager().is_mount_point_in_use(self.resource.name)

    @check_for_execution_errors
    def mount(self):
        self.get_mount_manager().mount(self.resource.name)

    @check_for_execution_errors
    def unmount(self):
        self.get_mount_manager().unmount(self.resource.name)

    def apply(self):
        """Converges the system to the resource's ensure value. Returns a list of the actions taken"""
        actions = []
        ensure = self.resource.ensure
        if ensure == "absent":
            if self.delete() is not None:
                actions.append("deleted")
            return actions
        for prop in ("dump", "pass"):
            if prop in self.resource:
                getattr(self, "set_{}".format(prop))(self.resource[prop])
        objectinfo = self.get_info()
        if objectinfo is None:
            self.create()
            actions.append("created")
        elif self.modify(self.resource.get_changed_properties(objectinfo)) is not None:
            actions.append("modified")
        mounted = self.is_mounted()
        if ensure == "mounted" and not mounted:
            self.mount()
            actions.append("mounted")
        elif ensure == "unmounted" and mounted:
            self.unmount()
            actions.append("unmounted")
        return actions
