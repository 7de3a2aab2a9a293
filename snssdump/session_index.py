"""Per-session summary built from a decoded command list.

Groups commands at Marker boundaries and collects the navigation URLs
recorded for each tab.
"""

from .snss_types import Marker, UpdateTabNavigation


def split_groups(commands):
    """Split a command list at Marker commands.

    Markers themselves are not part of any group and empty groups are
    dropped.
    """
    groups = []
    current = []
    for cmd in commands:
        if isinstance(cmd, Marker):
            if current:
                groups.append(current)
            current = []
        else:
            current.append(cmd)
    if current:
        groups.append(current)
    return groups


class SessionIndex:
    """Navigation registry for one decoded session."""

    def __init__(self):
        # tab_id -> {navigation index: url}
        self.navigations = {}
        # command name -> count
        self.counts = {}
        self.total = 0
        self.groups = 0

    def add_commands(self, commands):
        for cmd in commands:
            self.total += 1
            self.counts[cmd.name] = self.counts.get(cmd.name, 0) + 1
            if isinstance(cmd, UpdateTabNavigation):
                self.navigations.setdefault(cmd.tab_id, {})[cmd.index] = cmd.url
        self.groups += len(split_groups(commands))

    def tab_ids(self):
        return sorted(self.navigations)

    def tab_urls(self, tab_id):
        """URLs of a tab ordered by navigation index."""
        entries = self.navigations.get(tab_id, {})
        return [entries[i] for i in sorted(entries)]

    def all_urls(self):
        for tab_id in self.tab_ids():
            for url in self.tab_urls(tab_id):
                yield tab_id, url

    def summary(self) -> dict:
        return {
            'commands': self.total,
            'groups': self.groups,
            'counts': dict(sorted(self.counts.items())),
            'tabs': {str(t): self.tab_urls(t) for t in self.tab_ids()},
        }


def summarize(commands) -> dict:
    index = SessionIndex()
    index.add_commands(commands)
    return index.summary()
