import logging

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"


def deck_path(deck_id: int) -> str:
    return f"/deck/{deck_id}"


class StaleViews:
    """
    Collects the presentation paths a write has made stale.

    One instance per request; the HTTP layer turns the collected paths into
    an ``X-Revalidate`` header so the front end knows what to refetch.
    """

    def __init__(self):
        self._paths: list[str] = []

    def revalidate_path(self, path: str) -> None:
        if path not in self._paths:
            logger.debug("view %s is stale", path)
            self._paths.append(path)

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    def header_value(self) -> str:
        return ", ".join(self._paths)
