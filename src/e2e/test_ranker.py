import itertools

from spellcheck.models import RankedList
from spellcheck.ranker import levenshtein, rank


def _naive_rank(token, words, k):
    # same policy, no pruning
    kept = []
    for w in words:
        d = levenshtein(token, w)
        for pos, (_, cur) in enumerate(kept):
            if cur > d:
                kept.insert(pos, (w, d))
                del kept[k:]
                break
        else:
            if len(kept) < k:
                kept.append((w, d))
    return kept


def test_caat_ranks_cat_first():
    ranked = rank("caat", ["cat", "hat", "bat"], k=5)
    assert ranked.as_tuples() == [("cat", 1), ("hat", 2), ("bat", 2)]
    assert ranked.best.word == "cat"


def test_first_found_wins_on_ties():
    # every word is one substitution away from "aa"
    ranked = rank("aa", ["ab", "ba", "ac", "ca", "ad", "da", "ae"], k=3)
    assert ranked.as_tuples() == [("ab", 1), ("ba", 1), ("ac", 1)]


def test_closer_word_pushes_out_worst():
    ranked = rank("cat", ["dog", "cot", "cut", "bird", "cat"], k=3)
    assert ranked.as_tuples() == [("cat", 0), ("cot", 1), ("cut", 1)]


def test_capacity_is_never_exceeded():
    words = ["".join(p) for p in itertools.product("abc", repeat=3)]
    ranked = rank("abc", words, k=5)
    assert len(ranked) == 5
    dists = [c.distance for c in ranked]
    assert dists == sorted(dists)


def test_empty_dictionary_gives_empty_list():
    ranked = rank("anything", [], k=5)
    assert len(ranked) == 0
    assert ranked.best is None


def test_pruning_does_not_change_results():
    words = ["".join(p) for p in itertools.product("abcd", repeat=3)]
    words += ["a", "ab", "abcdab", "dcba", "aaaaaaa", "b"]
    for token in ["abc", "dd", "abcdabcd", "x", "bad"]:
        for k in (1, 3, 5):
            assert rank(token, words, k=k).as_tuples() == _naive_rank(token, words, k)


def test_ranked_list_offer_policy():
    rl = RankedList(2)
    assert rl.offer("a", 3)
    assert rl.offer("b", 3)        # room left: tie goes after
    assert not rl.offer("c", 3)    # full: tie is dropped
    assert rl.offer("d", 1)
    assert rl.as_tuples() == [("d", 1), ("a", 3)]
    assert rl.worst_distance() == 3
