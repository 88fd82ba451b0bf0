# ciderplan/ui/simulation_cache.py
from __future__ import annotations

from typing import Dict, Hashable, MutableMapping, Tuple

import streamlit as st

from ciderplan.config import settings
from ciderplan.core.cost_models import CostScenario, CostTemplate, SimulationResult
from ciderplan.core.result_repository import ResultRepository
from ciderplan.core.scenario_presets import PresetName
from ciderplan.core.simulation_engine import run_preset_comparison, run_simulation

InputsKey = Tuple[Hashable, ...]


# ---------------------------------------------------------
# Memoised engine runs (inputs are frozen dataclasses)
# ---------------------------------------------------------
@st.cache_data(
    max_entries=settings.SIMULATION_CACHE_MAX_ENTRIES,
    show_spinner=False,
)
def run_cached_simulation(
    template: CostTemplate,
    scenario: CostScenario,
    years: int,
    base_volume_liters: float,
) -> SimulationResult:
    return run_simulation(template, scenario, years, base_volume_liters)


@st.cache_data(
    max_entries=settings.SIMULATION_CACHE_MAX_ENTRIES,
    show_spinner=False,
)
def run_cached_preset_comparison(
    template: CostTemplate,
    scenario: CostScenario,
    years: int,
    base_volume_liters: float,
) -> Dict[PresetName, SimulationResult]:
    return run_preset_comparison(template, scenario, years, base_volume_liters)


def inputs_key(
    template: CostTemplate,
    scenario: CostScenario,
    years: int,
    base_volume_liters: float,
) -> InputsKey:
    """Value key for one set of engine inputs; equal inputs give equal keys."""
    return (template, scenario, int(years), float(base_volume_liters))


def save_result_once(
    repository: ResultRepository,
    saved_ids: MutableMapping[InputsKey, str],
    key: InputsKey,
    result: SimulationResult,
) -> Tuple[str, bool]:
    """
    Save result unless the same inputs were saved before.

    Returns (result_id, newly_saved). saved_ids maps input keys to stored
    ids and is owned by the caller (one dashboard session).
    """
    existing = saved_ids.get(key)
    if existing is not None:
        return existing, False

    result_id = repository.save(result)
    saved_ids[key] = result_id
    return result_id, True
