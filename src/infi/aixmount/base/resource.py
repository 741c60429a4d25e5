from infi.aixmount.errors import ConfigurationError
from logging import getLogger

logger = getLogger(__name__)

ENSURE_VALUES = ("defined", "present", "mounted", "unmounted", "absent")
PROPERTIES = ("atboot", "device", "nodename", "fstype", "options", "size", "volume", "dump", "pass")

TRUE_STRINGS = ("yes", "true")
FALSE_STRINGS = ("no", "false")


def to_boolean(value):
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    raise ValueError("invalid boolean value {!r}".format(value))


class MountResource(object):
    """The desired state of a single mount entry, identified by its mount point"""
    resource_type = "mount"

    def __init__(self, name, ensure="mounted", force=None, **properties):
        super(MountResource, self).__init__()
        if not name or not name.startswith('/'):
            raise ConfigurationError(self.resource_type, name, "Mount point must be an absolute path")
        if ensure not in ENSURE_VALUES:
            raise ConfigurationError(self.resource_type, name, "Invalid ensure value {!r}".format(ensure))
        self.name = name
        self.ensure = ensure
        self.force = force
        self._properties = {}
        for key, value in properties.items():
            self[key] = value

    def __repr__(self):
        return "<{} {} ensure={}>".format(self.__class__.__name__, self.name, self.ensure)

    def __getitem__(self, key):
        return self._properties[key]

    def __setitem__(self, key, value):
        self._properties[key] = self._normalize(key, value)

    def __contains__(self, key):
        return key in self._properties

    def get(self, key, default=None):
        return self._properties.get(key, default)

    def to_dict(self):
        return dict(self._properties)

    def _normalize(self, key, value):
        if key == "atboot":
            try:
                return to_boolean(value)
            except ValueError as error:
                raise ConfigurationError(self.resource_type, self.name, str(error))
        if key == "options" and (value is None or str(value).strip() == ""):
            raise ConfigurationError(self.resource_type, self.name, "Parameter options must not be empty")
        if key not in PROPERTIES:
            logger.debug("unknown property {!r} for {} {} will be ignored".format(key, self.resource_type, self.name))
        return value

    def get_changed_properties(self, observed):
        """Returns the requested properties that differ from the observed state dict.

        Properties the system does not report (e.g. volume) can not be compared and are left out"""
        changed = {}
        for key, value in self._properties.items():
            if key in ("dump", "pass") or key not in observed:
                continue
            if str(observed[key]) != str(value):
                changed[key] = value
        return changed
