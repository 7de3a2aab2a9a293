import pytest

from builders import (
    session, marker, update_tab_navigation, selected_navigation, window,
)


@pytest.fixture
def sample_session():
    return session(
        window(window_id=7, num_tabs=2, workspace='work'),
        update_tab_navigation(1, 2, 0, 'https://example.com/'),
        update_tab_navigation(1, 2, 1, 'https://example.com/docs'),
        selected_navigation(2, 1, 13300000000000000),
        marker(),
        update_tab_navigation(1, 3, 0, 'https://python.org/'),
        version=3,
    )


@pytest.fixture
def session_dir(tmp_path, sample_session):
    sessions = tmp_path / 'Sessions'
    sessions.mkdir()
    (sessions / 'Session_13300000000000001').write_bytes(sample_session)
    (sessions / 'Tabs_13300000000000001').write_bytes(session(marker()))
    (sessions / 'Tabs_broken').write_bytes(b'JUNKJUNK')
    (sessions / 'notes.txt').write_text('not a session')
    return sessions
