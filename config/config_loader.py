import os

import yaml

from cavegen.gen.params import CaveGenParams, WalkerParams


class ConfigLoader:
    def __init__(self, config_file="settings.yaml"):
        self.config = {}
        if os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                self.config = yaml.safe_load(f) or {}

    def get(self, *keys, default=None):
        """
        Fetch a value from the configuration.
        When a key path is missing:
          - raise KeyError if no default was provided
          - return the default otherwise
        """
        ref = self.config
        for key in keys:
            if isinstance(ref, dict) and key in ref:
                ref = ref[key]
            else:
                if default is not None:
                    return default
                raise KeyError(f"Configuration key {' -> '.join(keys)} not found and no default provided.")
        return ref


def load_generation_params(loader):
    """Build :class:`CaveGenParams` from the ``generation`` and ``walker`` sections."""
    defaults = CaveGenParams()
    walker_defaults = defaults.walker
    walker = WalkerParams(
        walk_steps=int(loader.get("walker", "walk_steps", default=walker_defaults.walk_steps)),
        max_step_length=int(loader.get("walker", "max_step_length", default=walker_defaults.max_step_length)),
        backtrack_probability=float(
            loader.get("walker", "backtrack_probability", default=walker_defaults.backtrack_probability)
        ),
    )
    seed = loader.get("generation", "seed", default=defaults.seed)
    return CaveGenParams(
        width=int(loader.get("generation", "width", default=defaults.width)),
        height=int(loader.get("generation", "height", default=defaults.height)),
        seed=None if seed is None else int(seed),
        walker_count=int(loader.get("generation", "walker_count", default=defaults.walker_count)),
        walker=walker,
    )
