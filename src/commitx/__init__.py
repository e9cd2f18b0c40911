"""commitx - interactive conventional commit assistant."""
