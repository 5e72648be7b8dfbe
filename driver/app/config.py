from dataclasses import dataclass
from typing import Optional

from dynaconf import Dynaconf
from driver.app.constants import DEFAULTS

from pgnudge.config.settings import (
    MutationConfig,
    OutputConfig,
    SamplingConfig,
    NudgeConfig,
)

settings = Dynaconf(
    envvar_prefix="PGNUDGE",
    load_dotenv=True,
    settings_files=[],
)


def _get(key: str):
    return settings.get(key, DEFAULTS[key])


def _parse_seed(value) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- Streams ----------------
    input_path: str = _get("INPUT")
    output_path: str = _get("OUTPUT")
    log_level: str = _get("LOG_LEVEL")

    # ---------------- Nudge Policy ----------------
    nudge: NudgeConfig = NudgeConfig(
        mutation=MutationConfig(
            enabled=_get("MUTATION_ENABLED"),
            count=_get("MUTATION_COUNT"),
            profile=_get("MUTATION_PROFILE"),
            attempts_per_success=_get("MUTATION_ATTEMPTS_PER_SUCCESS"),
            min_attempts=_get("MUTATION_MIN_ATTEMPTS"),
            verify_invariants=_get("MUTATION_VERIFY_INVARIANTS"),
        ),
        output=OutputConfig(
            bottom_scc=_get("BOTTOM_SCC"),
            evenodd=_get("EVENODD"),
            minmax=_get("MINMAX"),
            inflate=_get("INFLATE"),
            compress=_get("COMPRESS"),
            renumber=_get("RENUMBER"),
            order=_get("ORDER"),
        ),
        sampling=SamplingConfig(
            seed=_parse_seed(_get("SEED")),
        ),
    )
