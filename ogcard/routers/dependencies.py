from functools import lru_cache

from ogcard.controllers.opengraph_controller import OpenGraphController
from ogcard.services.container import ServiceContainer


@lru_cache()
def get_container() -> ServiceContainer:
    return ServiceContainer()


def get_controller() -> OpenGraphController:
    return OpenGraphController(get_container().get_metadata_service())
