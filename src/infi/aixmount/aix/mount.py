"""
AIX reports mounts in a fixed-width table:

      node       mounted        mounted over    vfs       date        options
    -------- ---------------  ---------------  ------ ------------ ---------------
             /dev/hd4         /                jfs2   Jun 12 10:00 rw,log=/dev/hd8
    nfssrv   /export/data     /mnt/data        nfs3   Jun 12 10:05 bg,hard,intr

local filesystems leave the node column empty, so the mounted-over column shifts left by one.
"""

from ..unix import mount

HEADER_LINES = 2


class AixMountManager(mount.UnixMountManager):
    mount_command = "/usr/sbin/mount"
    umount_command = "/usr/sbin/umount"

    def _parse_mount_output(self, output):
        mount_points = []
        for line in output.splitlines()[HEADER_LINES:]:
            fields = line.split()
            if not fields:
                continue
            if line[0].isspace():
                if len(fields) > 1:
                    mount_points.append(fields[1])
            elif len(fields) > 2:
                mount_points.append(fields[2])
        return mount_points
