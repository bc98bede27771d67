import copy
import logging

import pytest

from siteconfig.services.loader import load_site_config_data

SITE_DATA = {
    "url": "https://evanjustevan.com",
    "pathPrefix": "/",
    "title": "Evan Schultz",
    "subtitle": "just evan",
    "copyright": "© All rights reserved.",
    "disqusShortname": "",
    "postsPerPage": 4,
    "googleAnalyticsId": "UA-156909480-1",
    "useKatex": False,
    "menu": [
        {"label": "Articles", "path": "/"},
        {"label": "About me", "path": "/pages/about"},
    ],
    "author": {
        "name": "Evan Schultz",
        "photo": "/photo.jpg",
        "bio": "just evan.",
        "contacts": {
            "email": "hello@evanjustevan.com",
            "facebook": "#",
            "telegram": "#",
            "twitter": "e_p82",
            "github": "e-schultz",
            "rss": "",
            "vkontakte": "",
            "linkedin": "evanschultz1",
            "instagram": "sir_eeps",
            "line": "",
            "gitlab": "",
            "weibo": "",
            "codepen": "",
            "youtube": "",
            "soundcloud": "e-s82",
        },
    },
}


@pytest.fixture
def site_data():
    return copy.deepcopy(SITE_DATA)


@pytest.fixture
def minimal_data():
    """Only title, menu, postsPerPage and author carry values; the rest are empty."""
    return {
        "url": "",
        "pathPrefix": "",
        "title": "X",
        "subtitle": "",
        "copyright": "",
        "disqusShortname": "",
        "postsPerPage": 4,
        "googleAnalyticsId": "",
        "useKatex": False,
        "menu": [{"label": "Home", "path": "/"}],
        "author": {"name": "A", "photo": "", "bio": "", "contacts": {}},
    }


@pytest.fixture
def site_config(site_data):
    return load_site_config_data(site_data)


@pytest.fixture(autouse=True)
def reset_siteconfig_logger():
    yield
    # the CLI installs handlers bound to CliRunner's temporary streams
    logger = logging.getLogger("siteconfig")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
