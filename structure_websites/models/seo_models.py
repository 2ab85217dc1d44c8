# structure_websites/models/seo_models.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from structure_websites.models.fields import (
    Bool,
    IdHex,
    OptBool,
    OptFloat,
    OptInt,
    OptStr,
    Str,
    StrList,
    Timestamp,
)


class OpenGraphMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    og_title: Str = Field("", validation_alias="og:title")
    og_description: Str = Field("", validation_alias="og:description")
    og_image: Str = Field("", validation_alias="og:image")
    og_url: Str = Field("", validation_alias="og:url")
    og_type: Str = Field("", validation_alias="og:type")
    og_locale: OptStr = Field(None, validation_alias="og:locale")
    og_site_name: OptStr = Field(None, validation_alias="og:site_name")
    og_image_width: OptInt = Field(None, validation_alias="og:image:width")
    og_image_height: OptInt = Field(None, validation_alias="og:image:height")
    og_image_alt: OptStr = Field(None, validation_alias="og:image:alt")
    og_image_type: OptStr = Field(None, validation_alias="og:image:type")
    og_video: OptStr = Field(None, validation_alias="og:video")
    og_updated_time: OptStr = Field(None, validation_alias="og:updated_time")
    og_published_time: OptStr = Field(None, validation_alias="article:published_time")
    og_author: OptStr = Field(None, validation_alias="article:author")
    og_section: OptStr = Field(None, validation_alias="article:section")
    og_tag: StrList = Field(default_factory=list, validation_alias="article:tag")
    og_price_amount: OptFloat = Field(None, validation_alias="product:price:amount")
    og_price_currency: OptStr = Field(None, validation_alias="product:price:currency")


class TwitterCardMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    twitter_card: Str = Field("", validation_alias="twitter:card")
    twitter_title: Str = Field("", validation_alias="twitter:title")
    twitter_description: Str = Field("", validation_alias="twitter:description")
    twitter_image: Str = Field("", validation_alias="twitter:image")
    twitter_site: OptStr = Field(None, validation_alias="twitter:site")
    twitter_creator: OptStr = Field(None, validation_alias="twitter:creator")
    twitter_image_alt: OptStr = Field(None, validation_alias="twitter:image:alt")
    twitter_player: OptStr = Field(None, validation_alias="twitter:player")
    twitter_player_width: OptInt = Field(None, validation_alias="twitter:player:width")
    twitter_player_height: OptInt = Field(None, validation_alias="twitter:player:height")


class FacebookMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fb_app_id: OptStr = Field(None, validation_alias="fb:app_id")
    fb_admins: OptStr = Field(None, validation_alias="fb:admins")
    fb_pages: OptStr = Field(None, validation_alias="fb:pages")
    article_author: OptStr = Field(None, validation_alias="article:author")
    article_publisher: OptStr = Field(None, validation_alias="article:publisher")
    article_published_time: OptStr = Field(None, validation_alias="article:published_time")
    article_modified_time: OptStr = Field(None, validation_alias="article:modified_time")
    article_section: OptStr = Field(None, validation_alias="article:section")
    article_tag: StrList = Field(default_factory=list, validation_alias="article:tag")


class LinkedInMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    linkedin_owner: OptStr = Field(None, validation_alias="linkedin:owner")
    linkedin_image: OptStr = Field(None, validation_alias="linkedin:image")


class DublinCoreMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dc_title: Str = Field("", validation_alias="DC:title")
    dc_creator: Str = Field("", validation_alias="DC:creator")
    dc_subject: OptStr = Field(None, validation_alias="DC:subject")
    dc_description: OptStr = Field(None, validation_alias="DC:description")
    dc_publisher: OptStr = Field(None, validation_alias="DC:publisher")
    dc_date: OptStr = Field(None, validation_alias="DC:date")
    dc_type: OptStr = Field(None, validation_alias="DC:type")
    dc_language: OptStr = Field(None, validation_alias="DC:language")
    dc_rights: OptStr = Field(None, validation_alias="DC:rights")


class AlternateLanguage(BaseModel):
    hreflang: Str = ""
    href: Str = ""


class SeoPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: IdHex = Field("", validation_alias="_id")
    page: str = "/"
    page_key: Str = Field("", validation_alias="pageKey")
    title: Str = ""
    meta_description: Str = Field("", validation_alias="metaDescription")
    keywords: StrList = Field(default_factory=list)
    author: Str = ""
    canonical: Str = ""
    viewport: Str = ""
    robots: Str = ""

    expires: OptStr = None
    rating: OptStr = None
    content_language: OptStr = Field(None, validation_alias="contentLanguage")
    theme_color: OptStr = Field(None, validation_alias="themeColor")
    referrer: OptStr = None
    generator: OptStr = None
    copyright: OptStr = None
    revisit_after: OptStr = Field(None, validation_alias="revisitAfter")
    distribution: OptStr = None
    format_detection: OptStr = Field(None, validation_alias="formatDetection")
    geo_region: OptStr = Field(None, validation_alias="geoRegion")
    geo_position: OptStr = Field(None, validation_alias="geoPosition")

    open_graph: OpenGraphMeta
    twitter_card: TwitterCardMeta
    facebook: Optional[FacebookMeta] = None
    linked_in: Optional[LinkedInMeta] = None
    dublin_core: DublinCoreMeta
    # schema.org payloads are passed through as JSON
    structured_data: Optional[Dict[str, Any]] = None
    alternate_languages: Optional[List[AlternateLanguage]] = None

    pinterest_verification: OptStr = Field(None, validation_alias="pinterestVerification")
    apple_mobile_web_app_capable: OptStr = Field(None, validation_alias="appleMobileWebAppCapable")
    ms_tile_color: OptStr = Field(None, validation_alias="msTileColor")
    last_modified: OptStr = Field(None, validation_alias="lastModified")
    priority: OptFloat = None
    change_frequency: OptStr = Field(None, validation_alias="changeFrequency")


class SeoConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: IdHex = Field("", validation_alias="_id")
    name: Str = ""
    short_name: Str = ""
    version: Str = ""
    description: Str = ""
    author: Str = ""
    active: Bool = False
    created_at: Timestamp = Field(None, validation_alias="createdAt")
    updated_at: Timestamp = Field(None, validation_alias="updatedAt")

    favicon_url: OptStr = None
    default_locale: OptStr = None
    cookie_consent_required: OptBool = None
    robots_url: OptStr = None
    webmanifest: OptStr = None
    local_business: Optional[Dict[str, Any]] = None
