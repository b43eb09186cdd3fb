"""
Lookup table of the teams sales are attributed to.

Teams are not stored: they come from ``settings.KERMESSE_TEAMS``, a list of
``{"key", "name", "quota"}`` mappings kept in reporting order.
"""
from collections import namedtuple

from django.conf import settings

Team = namedtuple('Team', ['key', 'name', 'quota'])


def get_teams():
    return [Team(team['key'], team['name'], int(team['quota'])) for team in settings.KERMESSE_TEAMS]


def get_team(key):
    """Return the configured team for ``key`` or None"""
    for team in get_teams():
        if team.key == key:
            return team
    return None
