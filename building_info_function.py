# building_info_function.py

# Defaults used when a form field is left blank
DEFAULT_SPAN_X = "4,4,4"
DEFAULT_SPAN_Y = "4,3"
DEFAULT_STORY_HEIGHTS = "3.5,3.5"
DEFAULT_LEVEL_LOADS = "1.5,2.0,1.0"


def generate_configurations(raw_config):
    """Generate full ELF analysis configuration from raw form values.

    Blank geometry fields fall back to the sample building. Lengths are in
    meters, level loads in tonf per meter of span.
    """

    def _or_default(key, default):
        value = raw_config.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            return default
        return value

    config = {
        "building": {
            "Span X": _or_default("span_x", DEFAULT_SPAN_X),
            "Span Y": _or_default("span_y", DEFAULT_SPAN_Y),
            "Stories Heights": _or_default("story_heights", DEFAULT_STORY_HEIGHTS),
            "Level Loads": _or_default("level_loads", DEFAULT_LEVEL_LOADS),
        },

        "seismic": {
            "Ss": raw_config.get("ss"),
            "S1": raw_config.get("s1"),
            "Site Class": raw_config.get("site_class", "D"),
            "Ie": raw_config.get("Ie", 1.0),
            "R": raw_config.get("R", 8.0),
        },
    }

    return config
