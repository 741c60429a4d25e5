"""
A table-driven provider for objects managed by list/create/modify/delete command sets.

Subclasses declare an `attribute_mapping` table of `AttributeMapping` records. Each record names the system
attribute, the logical property it maps to, and optionally an encoder (`to_arg`, logical value -> list of
command line arguments) and a decoder (`from_value`, raw system value -> logical value). Decoders raise
`ValueError` for values the provider refuses to accept. The table must be a tuple, its lookup indexes are memoised
per table.

Listing commands are expected to print colon-delimited output with a `#`-prefixed header line, e.g.:

    #MountPoint:Device:Vfs:Nodename:Type:Size:Options:AutoMount:Acct
    /home:/dev/hd1:jfs2::bootfs:2097152:rw:yes:no

The first column of every record is the object's name.
"""

from collections import namedtuple
from infi.aixmount.errors import ConfigurationError, check_for_execution_errors
from infi.aixmount.unix.utils import execute_command, get_output
from infi.exceptools import chain
from infi.pyutils.lazy import cached_function
from logging import getLogger

logger = getLogger(__name__)

AttributeMapping = namedtuple("AttributeMapping", ["aix_attr", "prop", "to_arg", "from_value"])
AttributeMapping.__new__.__defaults__ = (None, None)


@cached_function
def index_attribute_mapping(attribute_mapping, field):
    """Returns a dict of the mapping table records by one of their fields. Memoised per table"""
    return {getattr(mapping, field): mapping for mapping in attribute_mapping}


class ObjectProvider(object):
    attribute_mapping = ()

    def __init__(self, resource):
        super(ObjectProvider, self).__init__()
        self.resource = resource

    def __repr__(self):
        return "<{} for {!r}>".format(self.__class__.__name__, self.resource)

    @classmethod
    def get_mapping_for_property(cls, prop):
        return index_attribute_mapping(cls.attribute_mapping, "prop").get(prop)

    @classmethod
    def get_mapping_for_attribute(cls, aix_attr):
        return index_attribute_mapping(cls.attribute_mapping, "aix_attr").get(aix_attr)

    def _configuration_error(self, reason):
        return ConfigurationError(self.resource.resource_type, self.resource.name, reason)

    #############################
    # Platform Specific Methods #
    #############################

    def lscmd(self, name=None):  # pragma: no cover
        raise NotImplementedError()

    def lsallcmd(self):  # pragma: no cover
        raise NotImplementedError()

    def addcmd(self):  # pragma: no cover
        raise NotImplementedError()

    def modifycmd(self, changes):  # pragma: no cover
        """Returns the command for applying the changes dict, or None if there is nothing to change"""
        raise NotImplementedError()

    def deletecmd(self):  # pragma: no cover
        raise NotImplementedError()

    ##################
    # Decode helpers #
    ##################

    def load_attribute(self, key, value, objectinfo):
        mapping = self.get_mapping_for_attribute(key)
        if mapping is None:
            return objectinfo
        if mapping.from_value is not None:
            try:
                value = mapping.from_value(value)
            except ValueError as error:
                raise chain(self._configuration_error(str(error)))
        objectinfo[mapping.prop] = value
        return objectinfo

    def finalize_attributes(self, objectinfo):
        """Called once all the attributes of a record were loaded, for attributes that depend on each other"""
        return objectinfo

    def parse_colon_list(self, line, keys):
        values = line.split(':')
        objectinfo = dict(name=values[0])
        for key, value in zip(keys, values):
            self.load_attribute(key, value, objectinfo)
        return self.finalize_attributes(objectinfo)

    def parse_command_output(self, output):
        lines = [line for line in output.splitlines() if line.strip()]
        if not lines or not lines[0].startswith('#'):
            return []
        keys = [key.strip().lower() for key in lines[0][1:].split(':')]
        return [self.parse_colon_list(line, keys) for line in lines[1:]]

    ##################
    # Encode helpers #
    ##################

    def get_arguments(self, key, value, mapping):
        if mapping.to_arg is not None:
            return list(mapping.to_arg(value))
        return ["{}={}".format(mapping.aix_attr, value)]

    def hash2args(self, hash):
        """Converts a dict of logical properties to command line arguments, in attribute mapping order.
        Properties without a mapping are ignored"""
        args = []
        for mapping in self.attribute_mapping:
            if mapping.prop in hash:
                args += self.get_arguments(mapping.prop, hash[mapping.prop], mapping)
        return args

    ###########
    # Actions #
    ###########

    @check_for_execution_errors
    def get_info(self):
        """Returns a freshly queried dict of the object's properties, or None if it does not exist"""
        process = execute_command(self.lscmd(), check_returncode=False)
        if process.get_returncode() != 0:
            logger.debug("{} {} does not exist".format(self.resource.resource_type, self.resource.name))
            return None
        records = self.parse_command_output(get_output(process))
        return records[0] if records else None

    @check_for_execution_errors
    def list_all(self):
        return self.parse_command_output(get_output(execute_command(self.lsallcmd())))

    def exists(self):
        return self.get_info() is not None

    def get_property(self, prop):
        objectinfo = self.get_info() or {}
        return objectinfo.get(prop)

    @check_for_execution_errors
    def create(self):
        cmd = self.addcmd()
        execute_command(cmd)
        return cmd

    @check_for_execution_errors
    def modify(self, changes):
        cmd = self.modifycmd(changes)
        if cmd is None:
            logger.debug("nothing to change in {} {}".format(self.resource.resource_type, self.resource.name))
            return None
        execute_command(cmd)
        return cmd

    @check_for_execution_errors
    def delete(self):
        cmd = self.deletecmd()
        execute_command(cmd)
        return cmd
