import json

import pytest

from config.loader import load_config
from resolver.lexicon import Lexicon, fallbacks_from_mapping
from resolver.service import GiftResolver


SMALL_LEXICON = {
    "chocolat noir": {
        "subcategory": "Chocolat",
        "main_category": "Gastronomie & boissons",
        "stores": ["Neuhaus", "Galler", "Leonidas"],
        "aliases": ["chocolat fonce"],
    },
    "Rhum arrangé": {
        "subcategory": "Spiritueux",
        "main_category": "Gastronomie & boissons",
        "stores": ["Prik&Tik"],
    },
    "casque audio": {
        "main_category": "High-tech & gadgets",
        "stores": ["MediaMarkt", "Coolblue", "fnac", "Krëfel", "Vanden Borre", "Apple Store", "Bose"],
    },
}

SMALL_FALLBACKS = {
    "Gastronomie & boissons": ["Prik&Tik", "Delitraiteur"],
    "Sport & plein air": ["Decathlon"],
    "Maison & décoration": ["Casa", "Zara Home"],
    "Beauté & bien-être": ["Rituals"],
    "Culture & divertissement": ["fnac", "Club"],
    "High-tech & gadgets": ["MediaMarkt"],
    "Enfants & famille": ["Maxi Toys"],
    "Loisirs créatifs & DIY": ["Hubo"],
    "Voyages & expériences": ["Bongo"],
    "Animaux": ["Tom&Co"],
}


@pytest.fixture
def small_lexicon():
    return Lexicon.from_mapping(SMALL_LEXICON)


@pytest.fixture
def small_fallbacks():
    return dict(SMALL_FALLBACKS)


@pytest.fixture
def small_resolver(small_lexicon, small_fallbacks):
    return GiftResolver(small_lexicon, fallbacks_from_mapping(small_fallbacks))


@pytest.fixture(scope="session")
def shipped_resolver():
    """Resolver over the repo's config.toml and data files."""
    return GiftResolver.from_config(load_config())


@pytest.fixture
def tmp_config(tmp_path):
    """A self-contained config.toml + data files under tmp_path."""
    (tmp_path / "lex.json").write_text(
        json.dumps(SMALL_LEXICON, ensure_ascii=False), encoding="utf-8"
    )
    (tmp_path / "fallbacks.json").write_text(
        json.dumps(SMALL_FALLBACKS, ensure_ascii=False), encoding="utf-8"
    )
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        "[resolver]\n"
        f'lexicon = "{(tmp_path / "lex.json").as_posix()}"\n'
        f'fallbacks = "{(tmp_path / "fallbacks.json").as_posix()}"\n'
        "max_distance = 2\n"
        "store_limit = 2\n",
        encoding="utf-8",
    )
    return cfg
