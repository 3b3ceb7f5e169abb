"""Tests for asset classification: icon heuristic, naming, format and density selection."""

import pytest

from zeplin_cli.models import AssetContent, AssetFormat
from zeplin_cli.services.asset_classifier import (
    PROMPT_NEEDED,
    classify_assets,
    density_options,
    is_icon,
    make_unique_file_name,
    select_content,
)
from tests.conftest import ScriptedChooser, make_asset, png, refuse_to_choose, svg


@pytest.mark.parametrize(
    "name",
    [
        "icon_close",
        "Close Icon",
        "ic_back",
        "IC_back",
        "IC-menu",
        "ico_save",
        "ICO-save",
        "Ico_home",
        "Icons/Arrow",
        "iconography_label",
    ],
)
def test_icon_names(name):
    assert is_icon(name)


@pytest.mark.parametrize("name", ["background_image", "logo", "music_cover", "Topic banner", "epic"])
def test_non_icon_names(name):
    assert not is_icon(name)


class TestUniqueFileNames:
    def test_first_claim_keeps_base(self):
        used = set()
        assert make_unique_file_name("close", used) == "close"
        assert used == {"close"}

    def test_collision_appends_two_digit_suffix(self):
        used = {"close", "close_01"}
        assert make_unique_file_name("close", used) == "close_02"
        assert "close_02" in used

    def test_repeated_display_names(self):
        assets = [make_asset("Close Icon!!", svg()), make_asset("Close Icon!!", svg())]
        result = classify_assets(assets, refuse_to_choose)
        assert [a.file_name for a in result] == ["close_icon", "close_icon_01"]

    def test_used_names_shared_between_runs(self):
        used = set()
        classify_assets([make_asset("ic_close", svg())], refuse_to_choose, used)
        result = classify_assets([make_asset("ic_close", svg())], refuse_to_choose, used)
        assert result[0].file_name == "ic_close_01"

    def test_empty_sanitized_name_falls_back(self):
        result = classify_assets([make_asset("!!!", png(2))], refuse_to_choose)
        assert result[0].file_name == "asset"

    def test_dropped_asset_still_claims_its_name(self):
        # Non-icon with only vector content is dropped
        assets = [make_asset("Hero", svg()), make_asset("Hero", png(2))]
        result = classify_assets(assets, refuse_to_choose)
        assert len(result) == 1
        assert result[0].file_name == "hero_01"


class TestSelectContent:
    def test_missing_format(self):
        assert select_content([svg()], AssetFormat.PNG) is None

    def test_single_variant(self):
        only = png(1)
        assert select_content([only, svg()], AssetFormat.PNG) is only

    def test_sparse_densities_pick_highest(self):
        contents = [png(1), png(3)]
        assert select_content(contents, AssetFormat.PNG).density == 3

    def test_variants_without_density_pick_first(self):
        first = AssetContent(url="https://cdn.test/a.png", format="png")
        second = AssetContent(url="https://cdn.test/b.png", format="png")
        assert select_content([first, second], AssetFormat.PNG) is first

    def test_three_densities_pick_2x(self):
        contents = [png(1), png(2), png(3)]
        assert select_content(contents, AssetFormat.PNG).density == 2

    def test_three_densities_without_2x_need_prompt(self):
        contents = [png(1), png(1.5), png(3)]
        assert select_content(contents, AssetFormat.PNG) is PROMPT_NEEDED


def test_density_options_sorted_ascending():
    options = density_options([png(3), png(1), png(1.5)])
    assert [label for label, _ in options] == ["@1x (png)", "@1.5x (png)", "@3x (png)"]
    assert [c.density for _, c in options] == [1, 1.5, 3]


class TestClassifyAssets:
    def test_icon_prefers_svg(self):
        result = classify_assets([make_asset("ic_close", png(2), svg())], refuse_to_choose)
        assert result[0].format == AssetFormat.SVG
        assert result[0].is_icon

    def test_icon_falls_back_to_png(self):
        result = classify_assets([make_asset("ic_close", png(1), png(3))], refuse_to_choose)
        assert result[0].format == AssetFormat.PNG
        assert result[0].content.density == 3

    def test_non_icon_ignores_svg(self):
        result = classify_assets([make_asset("Banner", svg(), png(2))], refuse_to_choose)
        assert result[0].format == AssetFormat.PNG
        assert not result[0].is_icon

    def test_non_icon_without_png_is_dropped(self, caplog):
        with caplog.at_level("INFO"):
            result = classify_assets([make_asset("Banner", svg())], refuse_to_choose)
        assert result == []
        assert "Banner" in caplog.text

    def test_ambiguous_density_asks_once(self):
        chooser = ScriptedChooser(answer=2)
        result = classify_assets([make_asset("Hero", png(1), png(1.5), png(3))], chooser)

        assert len(chooser.calls) == 1
        message, options = chooser.calls[0]
        assert message == 'Select the density for asset "Hero":'
        assert [label for label, _ in options] == ["@1x (png)", "@1.5x (png)", "@3x (png)"]
        assert result[0].content.density == 1.5

    def test_preferred_density_asks_nothing(self):
        result = classify_assets([make_asset("Hero", png(1), png(2), png(3))], refuse_to_choose)
        assert result[0].content.density == 2

    def test_icon_png_fallback_asks_once(self):
        chooser = ScriptedChooser(answer=1)
        result = classify_assets([make_asset("ic_x", png(3), png(1), png(1.5))], chooser)

        assert len(chooser.calls) == 1
        _, options = chooser.calls[0]
        assert [label for label, _ in options] == ["@1x (png)", "@1.5x (png)", "@3x (png)"]
        assert result[0].is_icon
        assert result[0].format == AssetFormat.PNG
        assert result[0].content.density == 1

    def test_icon_png_fallback_prefers_2x(self):
        result = classify_assets([make_asset("ic_x", png(1), png(2), png(3))], refuse_to_choose)
        assert result[0].is_icon
        assert result[0].format == AssetFormat.PNG
        assert result[0].content.density == 2

    def test_keeps_input_order(self):
        assets = [make_asset("b_image", png(2)), make_asset("a_image", png(2))]
        assert [a.file_name for a in classify_assets(assets, refuse_to_choose)] == ["b_image", "a_image"]
