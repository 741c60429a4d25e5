from .provider import AixMountProvider
from .mount import AixMountManager
