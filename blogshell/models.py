"""Pydantic models for the blog shell configuration."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MOTTO = """Read a little every day.
Write the code you just read about.
Break it, then fix it."""


class NavLink(BaseModel):
    """Single entry of the navigation bar."""

    label: str = Field(..., description="Visible link text.")
    href: str = Field(..., description="Target URL or site-relative path.")


class HeaderContent(BaseModel):
    """Fixed content rendered by the header fragment."""

    title: str = Field("The Code Notebook", description="Site title shown in the header.")
    subtitle: str = Field(
        "Long-form tutorials for working programmers",
        description="Line shown under the title.",
    )
    motto: str = Field(DEFAULT_MOTTO, description="Multi-line motto emitted as one text block.")
    form_id: str = Field(
        "lead-form", alias="formId", description="Id of the subscribe form."
    )
    container_id: str = Field(
        "subscribe-container",
        alias="containerId",
        description="Id of the element wrapping the subscribe form.",
    )
    button_label: str = Field("Subscribe", alias="buttonLabel")

    model_config = ConfigDict(populate_by_name=True)


class AssetPaths(BaseModel):
    """Static asset references emitted by the layout."""

    viewport: str = Field(
        "width=device-width, initial-scale=1", description="Viewport meta content."
    )
    base_css: str = Field("/css/style.css", alias="baseCss")
    highlight_css: str = Field(
        "/css/prism.css", alias="highlightCss", description="Code highlighting styles."
    )
    highlight_js: str = Field(
        "/js/prism.js", alias="highlightJs", description="Code highlighting script."
    )
    ui_bundle_js: str = Field(
        "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/js/bootstrap.bundle.min.js",
        alias="uiBundleJs",
        description="Third-party UI behavior bundle.",
    )
    ui_bundle_integrity: str = Field(
        "sha384-YvpcrYf0tY3lHB60NNkmXc5s9fDVZLESaAA55NDzOxhy9GkcIdslK1eN7N6jIeHz",
        alias="uiBundleIntegrity",
        description="Subresource integrity hash for the UI bundle.",
    )
    page_js: str = Field(
        "/js/main.js", alias="pageJs", description="Page behavior script (lead capture)."
    )

    model_config = ConfigDict(populate_by_name=True)


class LeadCaptureSettings(BaseModel):
    """Endpoint and DOM contract of the subscribe form submission."""

    endpoint: str = Field("/addLead", description="Path receiving the JSON POST.")
    success_message: str = Field(
        "lead created",
        alias="successMessage",
        description="Value of the response 'msg' field that confirms creation.",
    )
    thank_you: str = Field(
        "Thanks for subscribing! Check your inbox soon.",
        alias="thankYou",
        description="Message replacing the form after a confirmed submission.",
    )
    form_id: str = Field("lead-form", alias="formId")
    container_id: str = Field("subscribe-container", alias="containerId")

    model_config = ConfigDict(populate_by_name=True)


def _default_navigation() -> List[NavLink]:
    return [
        NavLink(label="Home", href="/"),
        NavLink(label="Tutorials", href="/tutorials/"),
        NavLink(label="Cheat Sheets", href="/cheatsheets/"),
        NavLink(label="About", href="/about/"),
    ]


class SiteSettings(BaseModel):
    """Top-level entry of site.yaml."""

    header: HeaderContent = Field(default_factory=HeaderContent)
    navigation: List[NavLink] = Field(
        default_factory=_default_navigation, description="Navigation links in display order."
    )
    assets: AssetPaths = Field(default_factory=AssetPaths)
    lead_capture: LeadCaptureSettings = Field(
        default_factory=LeadCaptureSettings, alias="leadCapture"
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _form_ids_match(self) -> "SiteSettings":
        # The submission handler looks up the form the header renders.
        if self.header.form_id != self.lead_capture.form_id:
            raise ValueError("header.formId and leadCapture.formId must match")
        if self.header.container_id != self.lead_capture.container_id:
            raise ValueError("header.containerId and leadCapture.containerId must match")
        return self


__all__ = [
    "AssetPaths",
    "DEFAULT_MOTTO",
    "HeaderContent",
    "LeadCaptureSettings",
    "NavLink",
    "SiteSettings",
]
