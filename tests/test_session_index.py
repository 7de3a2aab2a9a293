from snssdump.session_index import SessionIndex, split_groups, summarize
from snssdump.snss_reader import parse
from snssdump.snss_types import Marker, UpdateTabNavigation, SelectedNavigationInTab, Window


def test_split_groups_drops_markers_and_empty_groups():
    a = UpdateTabNavigation(1, 0, 'a')
    b = SelectedNavigationInTab(0)
    c = Window()
    groups = split_groups([Marker(), a, b, Marker(), Marker(), c, Marker()])
    assert groups == [[a, b], [c]]


def test_split_groups_without_markers():
    a = Window()
    assert split_groups([a]) == [[a]]
    assert split_groups([]) == []


def test_tab_urls_ordered_by_navigation_index():
    index = SessionIndex()
    index.add_commands([
        UpdateTabNavigation(5, 2, 'https://c'),
        UpdateTabNavigation(5, 0, 'https://a'),
        UpdateTabNavigation(5, 1, 'https://b'),
        UpdateTabNavigation(5, 1, 'https://b2'),
        UpdateTabNavigation(9, 0, 'https://z'),
    ])
    assert index.tab_ids() == [5, 9]
    assert index.tab_urls(5) == ['https://a', 'https://b2', 'https://c']
    assert index.tab_urls(42) == []
    assert list(index.all_urls())[-1] == (9, 'https://z')


def test_summary_of_sample_session(sample_session):
    summary = summarize(parse(sample_session))
    assert summary == {
        'commands': 6,
        'groups': 2,
        'counts': {
            'Marker': 1,
            'SelectedNavigationInTab': 1,
            'UpdateTabNavigation': 3,
            'Window': 1,
        },
        'tabs': {
            '2': ['https://example.com/', 'https://example.com/docs'],
            '3': ['https://python.org/'],
        },
    }
