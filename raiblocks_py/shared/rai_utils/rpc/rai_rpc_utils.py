from typing import Optional

from raiblocks_py.shared.configuration import ClientConfiguration
from .rai_node_service_default_impl import RaiNodeServiceDefaultImpl
from .rai_node_service_interface import IRaiNodeService


def get_node_service(
    node_service: Optional[IRaiNodeService], configuration: Optional[ClientConfiguration] = None
) -> IRaiNodeService:
    if node_service is not None:
        return node_service
    return RaiNodeServiceDefaultImpl(configuration=configuration)
