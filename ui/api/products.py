import logging

import requests

logger = logging.getLogger("catalog.api")


def _http(session):
    return session if session is not None else requests


def list_products(url: str, session=None):
    logger.debug("GET %s", url)
    res = _http(session).get(url)
    res.raise_for_status()
    return res.json()


def create_product(url: str, payload: dict, session=None):
    logger.debug("POST %s %s", url, payload)
    res = _http(session).post(url, json=payload)
    res.raise_for_status()
    return res.json()


def delete_product(url: str, product_id, session=None):
    item_url = f"{url}/{product_id}"
    logger.debug("DELETE %s", item_url)
    res = _http(session).delete(item_url)
    res.raise_for_status()
    # json-server answers `{}`, other backends may answer 204 with no body
    if not res.content:
        return None
    return res.json()
