from infi.aixmount import errors, get_mount_provider
from infi.aixmount.base.resource import MountResource
from unittest import TestCase
from mock import Mock, patch


class CheckForExecutionErrorsTestCase(TestCase):
    def test_execution_error(self):
        from infi.execute import ExecutionError
        result = Mock()
        result.get_returncode.return_value = 1
        result.get_stderr.return_value = b"crfs: 0506-909 /data file system already exists."

        @errors.check_for_execution_errors
        def create():
            raise ExecutionError(result)

        with self.assertRaises(errors.CommandFailed) as context:
            create()
        self.assertIn("already exists", str(context.exception))

    def test_missing_executable(self):
        @errors.check_for_execution_errors
        def create():
            raise OSError(2, "No such file or directory")

        with self.assertRaises(errors.CommandFailed):
            create()

    def test_other_errors_propagate(self):
        @errors.check_for_execution_errors
        def create():
            raise errors.ConfigurationError("mount", "/data", "bad")

        with self.assertRaises(errors.ConfigurationError):
            create()

    def test_messages_name_the_resource(self):
        self.assertEqual(str(errors.ConfigurationError("mount", "/data", "Can not change the fstype in AIX")),
                         "Can not change the fstype in AIX for mount /data")
        self.assertIn("mount /data", str(errors.DestructiveActionBlocked("mount", "/data")))


class GetMountProviderTestCase(TestCase):
    def test_get_mount_provider(self):
        from infi.aixmount.aix.provider import AixMountProvider
        provider = get_mount_provider(MountResource("/data"))
        self.assertIsInstance(provider, AixMountProvider)

    def test_unsupported_platform(self):
        with patch("infi.os_info.get_platform_string") as get_platform_string:
            get_platform_string.return_value = "linux-ubuntu-focal-x64"
            with self.assertRaises(errors.UnsupportedPlatform):
                get_mount_provider(MountResource("/data"), check_platform=True)

    def test_supported_platform(self):
        with patch("infi.os_info.get_platform_string") as get_platform_string:
            get_platform_string.return_value = "aix-7.2-powerpc"
            self.assertIsNotNone(get_mount_provider(MountResource("/data"), check_platform=True))
