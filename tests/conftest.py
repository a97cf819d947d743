"""Register the shared PDDL fixtures with every test module."""

from tests.fixtures.pddl_fixtures import *  # noqa: F403
