from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from mindgraph.config.settings import (
    HistoryConfig,
    EditorConfig,
    MindgraphConfig,
)


def build_settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="MINDGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


settings = build_settings()


def _setting(key: str, *, cast: str | None = None, source: Dynaconf | None = None):
    source = settings if source is None else source
    return source.get(key, DEFAULTS[key], cast=cast)


def editor_config(source: Dynaconf | None = None) -> EditorConfig:
    return EditorConfig(
        history=HistoryConfig(
            max_steps=_setting("HISTORY_MAX_STEPS", cast="@int", source=source),
        ),
        seed_sample_graph=_setting("SEED_SAMPLE_GRAPH", cast="@bool", source=source),
    )


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = _setting("APP_NAME")
    api_prefix: str = _setting("API_PREFIX")

    # ---------------- Mindgraph Policy ----------------
    mindgraph: MindgraphConfig = MindgraphConfig(editor=editor_config())
