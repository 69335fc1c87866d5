"""Tests for the grouped-settings flattener."""

from j2velements.flatten import (
    GROUP_FLATTENERS,
    flatten_audio_controls,
    flatten_audiogram_settings,
    flatten_chroma_key,
    flatten_component_settings,
    flatten_correction,
    flatten_crop,
    flatten_group,
    flatten_html_settings,
    flatten_positioning,
    flatten_rotate,
    flatten_subtitle_settings,
    flatten_text_settings,
    flatten_timing,
    flatten_visual_effects,
)


class TestFlattenGroup:
    def test_non_dict_group_is_empty(self):
        assert flatten_group("timing", "5") == {}
        assert flatten_group("timing", None) == {}
        assert flatten_group("crop", True) == {}

    def test_empty_group_is_empty(self):
        for name in GROUP_FLATTENERS:
            assert flatten_group(name, {}) == {}

    def test_unknown_sub_keys_dropped(self):
        assert flatten_group("timing", {"tempo": 120}) == {}


class TestFlattenTiming:
    def test_complete(self):
        result = flatten_timing({
            "start": 2.5, "duration": 10, "extraTime": 1,
            "fadeIn": 0.5, "fadeOut": 0.3, "zIndex": 5,
        })
        assert result == {
            "start": 2.5, "duration": 10, "extra-time": 1,
            "fade-in": 0.5, "fade-out": 0.3, "z-index": 5,
        }

    def test_string_values_coerced(self):
        result = flatten_timing({"start": "-4", "duration": "-2", "fadeIn": "0.5"})
        assert result == {"start": 0, "duration": -2, "fade-in": 0.5}

    def test_unset_values_omitted(self):
        assert flatten_timing({"start": None, "duration": ""}) == {}

    def test_z_index_clamped(self):
        assert flatten_timing({"zIndex": 500}) == {"z-index": 99}


class TestFlattenAudioControls:
    def test_complete_with_loop_true(self):
        result = flatten_audio_controls(
            {"volume": 8, "muted": True, "seek": 5.5, "loop": True},
        )
        assert result == {"volume": 8, "muted": True, "seek": 5.5, "loop": -1}

    def test_loop_false_plays_once(self):
        assert flatten_audio_controls({"loop": False}) == {"loop": 1}

    def test_string_conversions(self):
        result = flatten_audio_controls({"volume": "7.5", "seek": "3.2", "loop": "4"})
        assert result == {"volume": 7.5, "seek": 3.2, "loop": 4}

    def test_invalid_values_use_defaults(self):
        result = flatten_audio_controls(
            {"volume": "invalid", "seek": "invalid", "loop": "invalid"},
        )
        assert result == {"volume": 1, "loop": -1}

    def test_muted_string_false(self):
        assert flatten_audio_controls({"muted": "false"}) == {"muted": False}


class TestFlattenPositioning:
    def test_complete(self):
        result = flatten_positioning({
            "position": "center-center", "x": 100, "y": 200,
            "width": 300, "height": 400, "resize": "cover",
        })
        assert result == {
            "position": "center-center", "x": 100, "y": 200,
            "width": 300, "height": 400, "resize": "cover",
        }

    def test_non_positive_dimensions_are_auto(self):
        assert flatten_positioning({"width": -5, "height": 0}) == {"width": -1, "height": -1}

    def test_string_conversions(self):
        result = flatten_positioning({"x": "50.5", "y": "75.3", "width": "200", "height": "150"})
        assert result == {"x": 50.5, "y": 75.3, "width": 200, "height": 150}

    def test_invalid_values_omitted(self):
        result = flatten_positioning(
            {"x": "invalid", "y": "invalid", "width": "invalid", "height": "invalid"},
        )
        assert result == {}


class TestFlattenVisualEffects:
    def test_complete(self):
        result = flatten_visual_effects({
            "zoom": 1.5, "flipHorizontal": True, "flipVertical": False,
            "mask": "circle", "pan": "left", "panDistance": 100, "panCrop": True,
        })
        assert result == {
            "zoom": 1.5, "flip-horizontal": True, "flip-vertical": False,
            "mask": "circle", "pan": "left", "pan-distance": 100, "pan-crop": True,
        }

    def test_zoom_clamped(self):
        assert flatten_visual_effects({"zoom": "25"}) == {"zoom": 10}

    def test_invalid_numbers_omitted(self):
        assert flatten_visual_effects({"zoom": "invalid", "panDistance": "invalid"}) == {}

    def test_mask_trimmed(self):
        assert flatten_visual_effects({"mask": "  mask.png "}) == {"mask": "mask.png"}


class TestCompositeGroups:
    def test_crop_values(self):
        result = flatten_crop({"cropValues": {"width": 200, "height": 150, "x": 10, "y": 20}})
        assert result == {"crop": {"width": 200, "height": 150, "x": 10, "y": 20}}

    def test_crop_without_values(self):
        assert flatten_crop({"otherProp": "value"}) == {}

    def test_crop_with_empty_values(self):
        assert flatten_crop({"cropValues": {}}) == {}

    def test_rotate_values(self):
        assert flatten_rotate({"rotationValues": {"angle": 45, "speed": 2}}) == {
            "rotate": {"angle": 45, "speed": 2},
        }

    def test_chroma_key_values(self):
        result = flatten_chroma_key({"chromaValues": {"color": "#00FF00", "tolerance": 25}})
        assert result == {"chroma-key": {"color": "#00FF00", "tolerance": 25}}

    def test_chroma_key_empty_values(self):
        assert flatten_chroma_key({"chromaValues": {}}) == {}

    def test_correction(self):
        values = {"brightness": 1.2, "contrast": 0.8, "gamma": 1.1, "saturation": 1.5}
        assert flatten_correction(values) == {"correction": values}

    def test_correction_unknown_only(self):
        assert flatten_correction({"invalidProp": "value"}) == {}


class TestTypeSettingsGroups:
    def test_component_settings_json_string(self):
        result = flatten_component_settings(
            {"component": "basic/001", "settings": '{"headline": "Hi"}'},
        )
        assert result == {"component": "basic/001", "settings": {"headline": "Hi"}}

    def test_component_settings_empty_settings_omitted(self):
        assert flatten_component_settings({"component": "x", "settings": {}}) == {"component": "x"}

    def test_html_settings(self):
        result = flatten_html_settings({"html": "<div>Hello</div>", "tailwindcss": True, "wait": 3.5})
        assert result == {"html": "<div>Hello</div>", "tailwindcss": True, "wait": 3.5}

    def test_html_invalid_wait_defaults(self):
        assert flatten_html_settings({"wait": "invalid"}) == {"wait": 2}

    def test_html_undefined_html(self):
        assert flatten_html_settings({"html": None, "tailwindcss": False}) == {"tailwindcss": False}

    def test_audiogram_settings(self):
        result = flatten_audiogram_settings({"color": "FF0000", "opacity": 1.5, "amplitude": "invalid"})
        assert result == {"color": "#FF0000", "opacity": 1, "amplitude": 5}


class TestFlattenTextSettings:
    def test_renames_and_font_size(self):
        result = flatten_text_settings({
            "fontFamily": "Arial", "fontSize": "16px",
            "textColor": "#000", "backgroundColor": "#fff",
        })
        assert result == {
            "font-family": "Arial", "font-size": 16,
            "color": "#000", "background-color": "#fff",
        }

    def test_point_font_size(self):
        assert flatten_text_settings({"fontSize": "12pt"}) == {"font-size": 12}

    def test_unparseable_font_size_dropped(self):
        assert flatten_text_settings({"fontSize": "invalid"}) == {}

    def test_none_values_dropped(self):
        assert flatten_text_settings({"fontFamily": "Arial", "fontSize": None}) == {"font-family": "Arial"}

    def test_non_dict_is_empty(self):
        assert flatten_text_settings(None) == {}


class TestFlattenSubtitleSettings:
    def test_keywords_and_replace_verbatim(self):
        result = flatten_subtitle_settings({
            "allCaps": True,
            "keywords": ["Acme", "Launch"],
            "replace": {"acmeCorp": "Acme Corp"},
        })
        assert result == {
            "all-caps": True,
            "keywords": ["Acme", "Launch"],
            "replace": {"acmeCorp": "Acme Corp"},
        }

    def test_keywords_comma_string(self):
        assert flatten_subtitle_settings({"keywords": "alpha, beta,"}) == {
            "keywords": ["alpha", "beta"],
        }

    def test_empty_keywords_and_replace_omitted(self):
        assert flatten_subtitle_settings({"keywords": [], "replace": {}}) == {}
