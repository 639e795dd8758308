"""Render style configuration."""

from pydantic import BaseModel, Field


class RenderStyle(BaseModel):
    """Styling passed into the render pipeline.

    Border characters default to rich's rounded box.
    """

    border_top_left: str = Field(default="╭", min_length=1, max_length=1)
    border_top_right: str = Field(default="╮", min_length=1, max_length=1)
    border_bottom_left: str = Field(default="╰", min_length=1, max_length=1)
    border_bottom_right: str = Field(default="╯", min_length=1, max_length=1)
    border_horizontal: str = Field(default="─", min_length=1, max_length=1)
    border_vertical: str = Field(default="│", min_length=1, max_length=1)
    title_join: str = Field(default="├", min_length=1, max_length=1, description="Title box edge meeting the rule")
    info_join: str = Field(default="┤", min_length=1, max_length=1, description="Info box edge meeting the rule")
    rule: str = Field(default="─", min_length=1, max_length=1, description="Horizontal rule character")
    body_margin: int = Field(default=4, ge=0, description="Columns kept free beside the body text")
    prompt: str = Field(default="> ", description="Line input prompt")
    placeholder: str = Field(default="", description="Shown dimmed while the draft is empty")
    initializing: str = Field(default="\n  Initializing...", description="Frame shown before the first resize")
    title_style: str = Field(default="bold", description="rich style for the file name")
    border_style: str = Field(default="", description="rich style for box borders and rules")
    cursor_style: str = Field(default="reverse", description="rich style for the input cursor")
    timestamp_style: str = Field(default="dim", description="rich style for timestamps in list view")
    selected_style: str = Field(default="bold magenta", description="rich style for the selected list item")

    model_config = {"frozen": True}
