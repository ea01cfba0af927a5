import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `localization`) works during pytest collection regardless of
# the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from localization import TranslationEngine  # noqa: E402
from tests.factories.localization import (  # noqa: E402
    make_resolver,
    make_translations,
    write_properties,
)


@pytest.fixture
def translations_dir(tmp_path):
    """Temporary base folder containing en_US.properties.

    Holds the keys from make_translations() as the fallback language.
    """
    folder = tmp_path / "translations"
    folder.mkdir()
    write_properties(folder, "en_US", make_translations())
    return folder


@pytest.fixture
def spanish_resolver():
    """Resolver reporting a Spanish (Spain) host."""
    return make_resolver("es_ES.UTF-8", fallback_language="en_US")


@pytest.fixture
def engine(translations_dir, spanish_resolver):
    """TranslationEngine with en_US fallback and es_ES current locale."""
    return TranslationEngine(
        translations_dir,
        fallback_language="en_US",
        resolver=spanish_resolver,
    )
