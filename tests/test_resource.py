from infi.aixmount.base.resource import MountResource
from infi.aixmount.errors import ConfigurationError
from unittest import TestCase


class MountResourceTestCase(TestCase):
    def test_defaults(self):
        resource = MountResource("/data")
        self.assertEqual(resource.ensure, "mounted")
        self.assertIsNone(resource.force)
        self.assertEqual(resource.to_dict(), {})

    def test_relative_mount_point(self):
        with self.assertRaises(ConfigurationError):
            MountResource("data")

    def test_invalid_ensure(self):
        with self.assertRaises(ConfigurationError):
            MountResource("/data", ensure="gone")

    def test_atboot_normalization(self):
        self.assertTrue(MountResource("/data", atboot="Yes")["atboot"])
        self.assertTrue(MountResource("/data", atboot="true")["atboot"])
        self.assertFalse(MountResource("/data", atboot="NO")["atboot"])
        self.assertFalse(MountResource("/data", atboot=False)["atboot"])
        with self.assertRaises(ConfigurationError):
            MountResource("/data", atboot="maybe")

    def test_empty_options(self):
        with self.assertRaises(ConfigurationError) as context:
            MountResource("/data", options="")
        self.assertIn("mount /data", str(context.exception))

    def test_missing_options(self):
        for value in (None, "  "):
            with self.assertRaises(ConfigurationError):
                MountResource("/data", options=value)

    def test_get_changed_properties(self):
        resource = MountResource("/data", fstype="jfs2", options="rw,cio", size=1000000, volume="datavg",
                                 atboot=True, dump=0)
        observed = dict(name="/data", fstype="jfs2", options="rw", size="1000000", atboot=False, device="/dev/fslv00")
        self.assertEqual(resource.get_changed_properties(observed), dict(options="rw,cio", atboot=True))

    def test_unknown_properties_are_kept(self):
        resource = MountResource("/data", blocksize=4096)
        self.assertIn("blocksize", resource)
        self.assertEqual(resource.get("blocksize"), 4096)
