import random
import numpy as np
import pytest
from wordlebot.engine import apply_feedback, build_index, evaluate
from wordlebot.pickers import REGISTRY, create_picker, get_picker_ids, register
from wordlebot.pickers.base import BasePicker

WORDS = ["crane", "slate", "react", "brace", "grade", "plane", "level", "bevel", "eerie", "fuzzy"]


def test_registry_has_builtin_pickers():
    assert {"random_consistent", "letter_freq", "positional_freq"} <= set(get_picker_ids())


def test_unknown_picker_id():
    with pytest.raises(ValueError):
        create_picker("nope")


def test_register_rejects_duplicates():
    with pytest.raises(ValueError):
        @register
        class Dup(BasePicker):
            id = "random_consistent"
    assert REGISTRY["random_consistent"].__name__ == "RandomConsistentPicker"


@pytest.mark.parametrize("picker_id", get_picker_ids())
def test_pick_is_a_candidate(picker_id):
    index = build_index(WORDS)
    picker = create_picker(picker_id)
    rng = random.Random(3)

    cand = index.full()
    apply_feedback(index, cand, "slate", evaluate("slate", "crane"))
    members = set(np.flatnonzero(cand).tolist())
    for _ in range(20):
        assert picker.pick(index, cand, rng) in members


@pytest.mark.parametrize("picker_id", get_picker_ids())
def test_pick_from_empty_set(picker_id):
    index = build_index(WORDS)
    with pytest.raises(ValueError):
        create_picker(picker_id).pick(index, np.zeros(index.size, dtype=bool), random.Random(0))


def test_letter_freq_prefers_common_letters():
    index = build_index(["crane", "trace", "react", "fuzzy"])
    i = create_picker("letter_freq").pick(index, index.full(), random.Random(0))
    assert index.dictionary[i] in {"crane", "trace", "react"}


def test_positional_freq_prefers_common_slots():
    index = build_index(["crane", "crate", "craze", "fuzzy"])
    i = create_picker("positional_freq").pick(index, index.full(), random.Random(0))
    assert index.dictionary[i] in {"crane", "crate", "craze"}
