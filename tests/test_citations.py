from drills.citations import Citation, minimum

SHAPIRO = Citation("Shapiro", 2011)
BAUMANN_2010 = Citation("Baumann", 2010)
BAUMANN_2019 = Citation("Baumann", 2019)


def test_minimum_prefers_earlier_author():
    assert minimum(SHAPIRO, BAUMANN_2010) == BAUMANN_2010


def test_minimum_same_author_prefers_earlier_year():
    assert minimum(BAUMANN_2010, BAUMANN_2019) == BAUMANN_2010


def test_minimum_author_beats_year():
    assert minimum(SHAPIRO, BAUMANN_2019) == BAUMANN_2019


def test_less_than_orders_by_year_within_author():
    assert BAUMANN_2010.less_than(BAUMANN_2019)
    assert not BAUMANN_2019.less_than(BAUMANN_2010)


def test_less_than_is_irreflexive():
    assert not SHAPIRO.less_than(SHAPIRO)


def test_minimum_of_equal_values_returns_right():
    left = Citation("Baumann", 2010)
    right = Citation("Baumann", 2010)
    assert minimum(left, right) is right


def test_minimum_accepts_any_less_than_type():
    class Score:
        def __init__(self, points):
            self.points = points

        def less_than(self, other):
            return self.points < other.points

    low, high = Score(1), Score(2)
    assert minimum(high, low) is low
    assert minimum(low, high) is low