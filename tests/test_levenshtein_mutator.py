import pytest

from mini_corpus_py.core.alphabet import ALPHABET, SENTINEL, random_sequence
from mini_corpus_py.core.errors import PreconditionError
from mini_corpus_py.core.rng import CorpusRng
from mini_corpus_py.mutators.levenshtein_mutator import EditTag, LevenshteinMutator

from .reference import levenshtein


@pytest.mark.parametrize('k', [0, 1, 5, 16, 60])
def test_distance_upper_bound(k):
    rng = CorpusRng(2000 + k)
    a = random_sequence(120, rng)
    for _ in range(10):
        b, report = LevenshteinMutator(k, rng).mutate_with_report(a)
        assert k // 2 <= report.actual_k <= k
        assert report.substitutions + report.insertions + report.deletions == report.actual_k
        assert len(b) == len(a) + report.insertions - report.deletions
        assert levenshtein(a, b) <= report.actual_k


def test_plan():
    mut = LevenshteinMutator(40, CorpusRng(8))
    tags = mut.plan(100)
    assert len(tags) == 100
    edited = [t for t in tags if t is not EditTag.SAME]
    assert 20 <= len(edited) <= 40


def test_apply():
    mut = LevenshteinMutator(0, CorpusRng(8))
    tags = [EditTag.SAME, EditTag.SUBSTITUTE, EditTag.INSERT, EditTag.DELETE, EditTag.SAME]
    out = mut.apply(b'abcde', tags)
    assert len(out) == 5
    assert out[:2] == bytes([ord('a'), SENTINEL])
    assert out[2] in ALPHABET
    assert out[3:] == b'ce'


def test_apply_rejects_unknown_tag():
    mut = LevenshteinMutator(0, CorpusRng(8))
    with pytest.raises(AssertionError):
        mut.apply(b'ab', [EditTag.SAME, 7])


def test_zero_budget_is_identity():
    rng = CorpusRng(9)
    a = random_sequence(30, rng)
    assert LevenshteinMutator(0, rng).mutate(a) == a


def test_reproducible():
    a = random_sequence(200, CorpusRng(1))
    assert LevenshteinMutator(30, CorpusRng(2)).mutate(a) == LevenshteinMutator(30, CorpusRng(2)).mutate(a)


def test_budget_exceeds_length():
    with pytest.raises(PreconditionError):
        LevenshteinMutator(4, CorpusRng(4)).mutate(b'abc')


def test_plan_rejects_budget_over_length():
    with pytest.raises(PreconditionError):
        LevenshteinMutator(10, CorpusRng(1)).plan(3)


def test_plan_budget_range_at_full_length():
    mut = LevenshteinMutator(10, CorpusRng(1))
    for _ in range(20):
        edited = [t for t in mut.plan(10) if t is not EditTag.SAME]
        assert 5 <= len(edited) <= 10


def test_apply_rejects_tag_length_mismatch():
    mut = LevenshteinMutator(0, CorpusRng(8))
    with pytest.raises(PreconditionError):
        mut.apply(b'abcdef', [EditTag.SAME, EditTag.SAME])
    with pytest.raises(PreconditionError):
        mut.apply(b'ab', [EditTag.SAME] * 3)
