import random

import pytest

from mini_corpus_py.core.alphabet import ALPHABET, SENTINEL
from mini_corpus_py.core.errors import PreconditionError
from mini_corpus_py.core.family import Family, mutator_for
from mini_corpus_py.core.pair import generate_pair
from mini_corpus_py.core.rng import CorpusRng
from mini_corpus_py.mutators.hamming_mutator import HammingMutator
from mini_corpus_py.mutators.levenshtein_mutator import LevenshteinMutator

from .reference import hamming, levenshtein


def test_hamming_seed_1234():
    a, b = generate_pair(1000, 30, Family.HAMMING, 1234)
    assert len(a) == len(b) == 1000
    assert 15 <= hamming(a, b) <= 30
    assert (a, b) == generate_pair(1000, 30, 'hamming', 1234)


def test_levenshtein_pair():
    a, b = generate_pair(300, 30, Family.LEVENSHTEIN, 1234)
    assert len(a) == 300
    assert levenshtein(a, b) <= 30
    assert (a, b) == generate_pair(300, 30, 'Levenshtein', 1234)


def test_pair_accepts_rng():
    rng = CorpusRng(11)
    p1 = generate_pair(50, 5, Family.HAMMING, rng)
    p2 = generate_pair(50, 5, Family.HAMMING, rng)
    # shared generator keeps advancing
    assert p1 != p2
    assert p1 == generate_pair(50, 5, Family.HAMMING, 11)


def test_zero_length():
    assert generate_pair(0, 0, Family.LEVENSHTEIN, 1) == (b'', b'')


def test_zero_budget_hamming():
    a, b = generate_pair(200, 0, Family.HAMMING, 3)
    assert a == b


def test_bad_family():
    with pytest.raises(PreconditionError):
        generate_pair(10, 1, 'jaro', 1)


def test_mutator_for():
    rng = CorpusRng(1)
    assert isinstance(mutator_for('hamming', 3, rng), HammingMutator)
    assert isinstance(mutator_for(Family.LEVENSHTEIN, 3, rng), LevenshteinMutator)


def test_hamming_seed_1234_draw_order():
    # alphabet draws, then the budget, then one shuffle of all positions
    r = random.Random(1234)
    a = bytes(r.choice(ALPHABET) for _ in range(1000))
    actual_k = r.randint(15, 30)
    idx = list(range(1000))
    r.shuffle(idx)
    b = bytearray(a)
    for pos in idx[:actual_k]:
        b[pos] = SENTINEL

    pair = generate_pair(1000, 30, Family.HAMMING, 1234)
    assert pair == (a, bytes(b))
    assert hamming(pair.a, pair.b) == actual_k
