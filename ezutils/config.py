import os
from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir

# library-wide defaults; every key here can be overridden with configure()
# or by composing a named config with load_config().
#
# Example configs/ezutils.yaml:
# text:
#   separator: "; "
# random:
#   seed: 42

_base_config = """
text:
  separator: ", "
  null_text: "null"

math:
  epsilon_scale: 1000

random:
  seed: null
"""

_active_config = None

#-------------------------------------------------------------------------------
# Flatten/unflatten dict
#-------------------------------------------------------------------------------

def flatten_dict(d, parent_key='', sep='.'):
    items = []
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.extend(flatten_dict(v, new_key, sep=sep).items())
        else:
            items.append((new_key, v))
    return dict(items)

def unflatten_dict(d):
    result = {}
    for key, value in d.items():
        parts = key.split('.')
        d = result
        for part in parts[:-1]:
            if part not in d:
                d[part] = {}
            d = d[part]

        d[parts[-1]] = value
    return result

#-------------------------------------------------------------------------------
# Active config
#-------------------------------------------------------------------------------

def make_base_config(flattened=False):
    base_config = OmegaConf.create(_base_config)
    OmegaConf.set_struct(base_config, True)

    if flattened:
        base_config = flatten_dict(OmegaConf.to_container(base_config))

    return base_config

def get_config():
    global _active_config
    if _active_config is None:
        _active_config = make_base_config()
    return _active_config

def reset_config():
    global _active_config
    _active_config = make_base_config()
    return _active_config

def _as_overrides(overrides):
    if isinstance(overrides, str):
        return OmegaConf.create(overrides)

    if isinstance(overrides, DictConfig):
        return overrides

    if not isinstance(overrides, dict):
        raise TypeError(f"Config overrides must be a dict, DictConfig or YAML string, got {type(overrides).__name__}")

    # dotted keys ("text.separator") are allowed at the top level
    if any('.' in str(k) for k in overrides):
        overrides = unflatten_dict(overrides)

    return OmegaConf.create(overrides)

def configure(overrides=None, **sections):
    """
    Merges overrides into the active config and returns the result.

    Overrides can be a nested dict, a dict with dotted keys, a DictConfig or a
    YAML string; sections can also be passed as keyword arguments, e.g.
    configure(text={"separator": "; "}). Unknown keys raise an
    omegaconf.errors.ConfigKeyError and leave the active config unchanged.
    """
    global _active_config
    config = get_config()

    if overrides is not None:
        config = OmegaConf.merge(config, _as_overrides(overrides))

    if sections:
        config = OmegaConf.merge(config, _as_overrides(sections))

    _active_config = config
    return _active_config

def load_config(config, hydra_kwargs=None):
    """
    Loads a config and makes it the active one.

    Config can be either a loaded config (dict or DictConfig) or a config
    name passed as a string. If a config name is passed, hydra_kwargs can be
    used to specify the hydra initialize_config_dir parameters (e.g.,
    config_dir); by default the config is looked up in ./configs.
    """
    global _active_config
    if isinstance(config, str):
        if hydra_kwargs is None:
            hydra_kwargs = dict(
                version_base=None,
                config_dir=os.path.join(os.getcwd(), "configs")
            )

        with initialize_config_dir(**hydra_kwargs):
            config = compose(config_name=config)

    _active_config = OmegaConf.merge(make_base_config(), _as_overrides(config))
    return _active_config

def config_diff():
    """Returns the (flattened) entries of the active config that differ
    from the defaults."""
    defaults = make_base_config(flattened=True)
    active = flatten_dict(OmegaConf.to_container(get_config(), resolve=True))

    return {k: v for k, v in active.items() if k not in defaults or defaults[k] != v}
