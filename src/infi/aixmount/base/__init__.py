from .resource import MountResource
from .provider import ObjectProvider, AttributeMapping
