import itertools

import pytest
from wordsim.engine import (
    Constraints, FrequencyModel, LengthMismatch, Oracle, Outcome,
    apply, evaluate, filter_candidates, is_word,
)

# --- N=5 golden tests; both policies agree when letters are not repeated ---
@pytest.mark.parametrize("policy", ["membership", "strict"])
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("trace","crane","-GGYG"),
])
def test_evaluate_golden(guess, answer, expected, policy):
    assert evaluate(guess, answer, policy=policy).pattern == expected

@pytest.mark.parametrize("policy,expected", [
    ("membership", "YYY-G"),  # every non-exact 'e' is PRESENT
    ("strict", "--Y-G"),      # the solution's one 'e' is consumed by the exact match
])
def test_repeated_letter_policies(policy, expected):
    assert evaluate("eerie", "crane", policy=policy).pattern == expected

def test_apple_all_exact():
    r = Oracle("apple").evaluate("apple")
    assert r.is_correct is True
    assert r.outcomes == (Outcome.EXACT,) * 5

def test_length_mismatch_fails_fast():
    with pytest.raises(LengthMismatch):
        Oracle("crane").evaluate("cranes")
    with pytest.raises(ValueError):
        Oracle("crane").evaluate("")

def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        Oracle("crane", policy="fuzzy")

@pytest.mark.parametrize("policy", ["membership", "strict"])
def test_correct_iff_equal_and_all_exact(dictionary, policy):
    words = dictionary[:40]
    for guess, solution in itertools.product(words, words):
        r = evaluate(guess, solution, policy=policy)
        assert r.is_correct is (guess == solution)
        assert len(r.outcomes) == 5
        assert all(o in Outcome for o in r.outcomes)
        exact = sum(1 for o in r.outcomes if o is Outcome.EXACT)
        assert (exact == 5) is r.is_correct

# --- pool filter ---
def test_filter_crane_trace():
    pool = ["crane", "react", "trace", "caret", "brace", "grace", "ocean", "carve"]
    c = Constraints(N=5)
    out = apply(pool, evaluate("trace", "crane"), c)
    assert out == ["crane", "brace", "grace"]
    assert c.excluded == {"t"}
    assert c.required == {"r", "a", "c", "e"}
    assert c.fixed == [None, "r", "a", None, "e"]
    assert all("t" not in w for w in out)
    assert all(w[4] == "e" for w in out)

def test_repeated_letter_not_excluded():
    # strict: 'e' is ABSENT twice but EXACT at the end -> required, not excluded
    c = Constraints(N=5)
    out = apply(["crane", "brine", "cairn"], evaluate("eerie", "crane", policy="strict"), c)
    assert "e" in c.required and "e" not in c.excluded
    assert "crane" in out

def test_apply_without_constraints_uses_fresh_facts():
    out = apply(["crane", "stare", "scoop"], evaluate("raise", "crane"))
    assert out == ["crane", "stare"]

@pytest.mark.parametrize("policy", ["membership", "strict"])
def test_filter_monotonic_and_sound(dictionary, policy):
    guesses = dictionary[::37]
    for solution in dictionary[::23]:
        c = Constraints(N=5)
        pool = list(dictionary)
        oracle = Oracle(solution, policy=policy)
        for g in guesses[:4]:
            new_pool = apply(pool, oracle.evaluate(g), c)
            assert len(new_pool) <= len(pool)
            assert set(new_pool) <= set(pool)
            assert solution in new_pool
            pool = new_pool

def test_filter_candidates_history():
    words = ["crane","raise","stare","trace","cared","racer","scoop","crab"]
    history = [evaluate("raise", "crane")]
    cand = filter_candidates(words, history, N=5)
    assert "crane" in cand and "scoop" not in cand and "crab" not in cand
    assert cand == ["crane", "trace"]
    assert filter_candidates(words, history + [evaluate("stare", "crane")], N=5) == ["crane"]

# --- frequency model ---
def test_frequency_counts_and_probabilities():
    m = FrequencyModel.build(["apple", "angle"], N=5)
    assert m.total == 10
    assert m.count("a", 0) == 2
    assert m.count("p", 1) == 1
    assert m.elsewhere("p", 1) == 1
    assert m.p_exact("a", 0) == pytest.approx(0.2)
    assert m.p_present_elsewhere("a", 0) == 0.0
    assert m.p_absent("a", 0) == pytest.approx(0.8)
    assert m.p_present_elsewhere("e", 0) == pytest.approx(0.2)

def test_frequency_tables_match_accessors(sample):
    m = FrequencyModel.build(sample, N=5)
    pe, pp, pa = m.probability_tables()
    for li, letter in enumerate("abcdefghijklmnopqrstuvwxyz"):
        for pos in range(5):
            assert pe[li, pos] == pytest.approx(m.p_exact(letter, pos))
            assert pp[li, pos] == pytest.approx(m.p_present_elsewhere(letter, pos))
            assert pa[li, pos] == pytest.approx(m.p_absent(letter, pos))

def test_frequency_model_is_read_only():
    m = FrequencyModel.build(["crane"], N=5)
    with pytest.raises(ValueError):
        m.counts[0, 0] = 7

def test_empty_model():
    m = FrequencyModel.build([], N=5)
    assert m.total == 0
    assert m.p_exact("a", 0) == 0.0
    assert m.p_absent("a", 0) == 1.0

def test_frequency_model_pickles_read_only():
    import pickle
    m = FrequencyModel.build(["crane", "trace"], N=5)
    m2 = pickle.loads(pickle.dumps(m))
    assert m2 == m
    assert m2.counts.flags.writeable is False

def test_is_word():
    assert is_word("crane", 5) is True
    assert is_word("CRANE", 5) is False
    assert is_word("cranes", 5) is False
    assert is_word("cr4ne", 5) is False
    assert is_word(None, 5) is False
