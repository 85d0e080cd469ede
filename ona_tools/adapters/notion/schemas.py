"""Notion adapter Pydantic schemas.

Input schemas for all Notion tools. Each mirrors the request shape of the
Notion REST resource it targets; the JSON Schema generated from these models
is what the LLM sees.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StrictModel(BaseModel):
    """Rejects unknown keys."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# ============================================================================
# SHARED OBJECTS (rich text, icons, covers)
# ============================================================================


class LinkObject(StrictModel):
    url: str = Field(..., description="The URL the text should link to.")


class TextObject(StrictModel):
    content: str = Field(..., max_length=2000, description="The plain text content.")
    link: LinkObject | None = Field(None, description="Optional link object for this text segment.")


class RichTextObject(StrictModel):
    """A rich text object. Multiple can form a paragraph or list item."""

    text: TextObject = Field(..., description="Text object containing content and optional link.")
    type: Literal["text"] = Field("text", description="Type of rich text object, typically 'text'.")


RichTextArray = Annotated[
    list[RichTextObject],
    Field(min_length=1, max_length=100, description="An array of rich text objects."),
]


class PlainTextContent(BaseModel):
    content: str = Field(..., max_length=2000, description="The text content.")


class PlainRichText(BaseModel):
    """Rich text object reduced to its text content."""

    text: PlainTextContent


class EmojiIcon(BaseModel):
    type: Literal["emoji"]
    emoji: str = Field(..., description='Emoji character, e.g., "🎉"')


class ExternalFile(BaseModel):
    url: str = Field(..., description="URL of the external image.")


class ExternalIcon(BaseModel):
    type: Literal["external"]
    external: ExternalFile


PageIcon = Annotated[
    Union[EmojiIcon, ExternalIcon],
    Field(
        discriminator="type",
        description=(
            'Page icon. Either { "type": "emoji", "emoji": "🎉" } or '
            '{ "type": "external", "external": { "url": "https://..." } }.'
        ),
    ),
]


class ExternalCover(BaseModel):
    """Page cover image from an external URL."""

    type: Literal["external"] = Field(..., description='Type of the cover, must be "external".')
    external: ExternalFile


class PageParent(BaseModel):
    page_id: str = Field(..., description="The UUID of the parent page.")


# ============================================================================
# BLOCK SCHEMAS
# ============================================================================


class RetrieveBlockInput(BaseModel):
    """Input schema for notion_retrieve_a_block."""

    block_id: str = Field(..., description="Identifier for a Notion block to retrieve.")


class GetBlockChildrenInput(BaseModel):
    """Input schema for notion_get_block_children."""

    block_id: str = Field(
        ..., description="Identifier for a block (can be a page ID as pages are blocks)."
    )
    start_cursor: str | None = Field(
        None,
        description="If supplied, returns a page of results starting after the cursor provided.",
    )
    page_size: int | None = Field(
        None,
        le=100,
        description="The number of items desired in the response. Maximum: 100.",
    )


class RichTextBlockContent(StrictModel):
    rich_text: RichTextArray


class ChildBlock(StrictModel):
    """A block to append: its type plus exactly the matching content object."""

    type: Literal["paragraph", "bulleted_list_item"] = Field(
        ..., description="The type of block to append."
    )
    paragraph: RichTextBlockContent | None = None
    bulleted_list_item: RichTextBlockContent | None = None

    @model_validator(mode="after")
    def _content_matches_type(self) -> "ChildBlock":
        other = "bulleted_list_item" if self.type == "paragraph" else "paragraph"
        if getattr(self, self.type) is None or getattr(self, other) is not None:
            raise ValueError(
                "The block's content object (e.g., 'paragraph') must correspond to "
                "its 'type' and be exclusively provided."
            )
        return self


class PatchBlockChildrenInput(BaseModel):
    """Input schema for notion_patch_block_children."""

    block_id: str = Field(
        ...,
        description="Identifier for a block (can be a page ID as pages are blocks) to append children to.",
    )
    children: list[ChildBlock] = Field(
        ..., min_length=1, description="An array of block objects to append as children."
    )
    after: str | None = Field(
        None,
        description="The ID of the existing block that the new block(s) should be appended after.",
    )


class ToDoUpdate(StrictModel):
    rich_text: RichTextArray | None = None
    checked: bool | None = None

    @model_validator(mode="after")
    def _has_update(self) -> "ToDoUpdate":
        if self.rich_text is None and self.checked is None:
            raise ValueError("For to_do updates, provide 'rich_text' and/or 'checked' property.")
        return self


BLOCK_CONTENT_FIELDS = (
    "paragraph",
    "heading_1",
    "heading_2",
    "heading_3",
    "bulleted_list_item",
    "numbered_list_item",
    "to_do",
    "toggle",
    "quote",
    "callout",
)


class UpdateBlockInput(StrictModel):
    """Input schema for notion_update_a_block."""

    block_id: str = Field(..., description="Identifier for a Notion block to update.")
    archived: bool | None = Field(
        None, description="Set to true to archive the block, false to un-archive."
    )
    paragraph: RichTextBlockContent | None = None
    heading_1: RichTextBlockContent | None = None
    heading_2: RichTextBlockContent | None = None
    heading_3: RichTextBlockContent | None = None
    bulleted_list_item: RichTextBlockContent | None = None
    numbered_list_item: RichTextBlockContent | None = None
    to_do: ToDoUpdate | None = None
    toggle: RichTextBlockContent | None = None
    quote: RichTextBlockContent | None = None
    callout: RichTextBlockContent | None = None

    def content_updates(self) -> list[str]:
        """Names of the block-specific update objects that were supplied."""
        return [f for f in BLOCK_CONTENT_FIELDS if getattr(self, f) is not None]

    @model_validator(mode="after")
    def _single_update(self) -> "UpdateBlockInput":
        updates = self.content_updates()
        if (self.archived is None and not updates) or len(updates) > 1:
            raise ValueError(
                "Update requires 'archived' status or exactly one block-specific update "
                "object (e.g., 'paragraph: { rich_text: ... }', 'to_do: { checked: ... }')."
            )
        return self


class DeleteBlockInput(BaseModel):
    """Input schema for notion_delete_a_block."""

    block_id: str = Field(..., description="Identifier for a Notion block to delete (archive).")


# ============================================================================
# PAGE SCHEMAS
# ============================================================================


class RetrievePageInput(BaseModel):
    """Input schema for notion_retrieve_a_page."""

    page_id: str = Field(..., description="Identifier for a Notion page to retrieve.")
    filter_properties: str | None = Field(
        None,
        description=(
            "A comma-separated list of page property value IDs to return. If not "
            "provided, all properties are returned. For example: 'id1,id2,id3'."
        ),
    )


class LooseRichTextObject(BaseModel):
    type: Literal["text"] | None = Field(None, description="The type of the rich text object.")
    text: TextObject


class LooseRichTextContent(BaseModel):
    rich_text: list[LooseRichTextObject] = Field(..., description="An array of rich text objects.")


class PageChildBlock(BaseModel):
    type: Literal["paragraph", "bulleted_list_item"] = Field(..., description="The type of the block.")
    paragraph: LooseRichTextContent | None = Field(
        None, description='Paragraph block content. Required if type is "paragraph".'
    )
    bulleted_list_item: LooseRichTextContent | None = Field(
        None,
        description='Bulleted list item content. Required if type is "bulleted_list_item".',
    )


class PageTitleProperties(BaseModel):
    """Page properties; the title property key must be "title"."""

    title: list[PlainRichText] = Field(
        ..., max_length=100, description='The rich text array for the page title.'
    )


class PostPageInput(BaseModel):
    """Input schema for notion_post_page."""

    parent: PageParent = Field(
        ..., description='The parent of the new page, e.g. { "page_id": "UUID_OF_PARENT_PAGE" }.'
    )
    properties: PageTitleProperties = Field(
        ...,
        description='Page properties, e.g. { "title": [{ "text": { "content": "My Page Title" }}] }.',
    )
    children: list[PageChildBlock] | None = Field(
        None, description="An array of block objects to define the content of the new page."
    )
    icon: PageIcon | None = None
    cover: ExternalCover | None = None


class PatchPageInput(BaseModel):
    """Input schema for notion_patch_page."""

    page_id: str = Field(..., description="Identifier for a Notion page to update.")
    properties: dict[str, Any] | None = Field(
        None,
        description=(
            "Keys are property names or IDs, values are Notion property value objects. "
            'E.g., { "Name": { "title": [{ "text": { "content": "New Page Title" } }] } }.'
        ),
    )
    archived: bool | None = Field(
        None,
        description="Set to true to archive (delete) the page. Set to false to restore it.",
    )
    icon: PageIcon | None = None
    cover: ExternalCover | None = None


class RetrievePagePropertyInput(BaseModel):
    """Input schema for notion_retrieve_a_page_property."""

    page_id: str = Field(..., description="Identifier for a Notion page (UUID).")
    property_id: str = Field(
        ...,
        description='Identifier for a page property (e.g., "title" or a custom property ID like "aBcD").',
    )
    page_size: int | None = Field(
        None,
        le=100,
        description="For paginated properties, the maximum number of property items on a page.",
    )
    start_cursor: str | None = Field(
        None,
        description="For paginated properties, returns a page of results starting after the cursor.",
    )


# ============================================================================
# DATABASE SCHEMAS
# ============================================================================


class RetrieveDatabaseInput(BaseModel):
    """Input schema for notion_retrieve_a_database."""

    database_id: str = Field(..., description="Identifier for a Notion database (UUID).")


class DatabaseParent(BaseModel):
    page_id: str = Field(
        ..., description="The UUID of the parent page where the database will be created."
    )
    type: Literal["page_id"] = Field(..., description="The type of parent, must be 'page_id'.")


class CreateDatabaseInput(BaseModel):
    """Input schema for notion_create_a_database."""

    model_config = ConfigDict(populate_by_name=True)

    parent: DatabaseParent = Field(..., description="The parent page for the new database.")
    properties_json: str = Field(
        ...,
        alias="propertiesJson",
        description=(
            "A JSON string representing the property schema of the database. Example: "
            '\'{ "Name": { "title": {} }, "Status": { "select": { "options": '
            '[{"name": "To Do", "color": "red"}] } } }\'.'
        ),
    )
    title: list[LooseRichTextObject] | None = Field(
        None,
        max_length=100,
        description="The title of the new database, as an array of rich text objects.",
    )


class UpdateDatabaseInput(BaseModel):
    """Input schema for notion_update_a_database."""

    database_id: str = Field(..., description="Identifier for a Notion database (UUID).")
    title: list[PlainRichText] | None = Field(
        None, description="Rich text objects for the database's new title."
    )
    description: list[PlainRichText] | None = Field(
        None, description="Rich text objects for the database's new description."
    )
    properties: dict[str, Any] | None = Field(
        None,
        description="Keys are existing property names or IDs, values are new property schema objects.",
    )


class TextFilterConditions(StrictModel):
    """Conditions for text-based properties (title, rich_text, url, email, phone_number)."""

    equals: str | None = None
    does_not_equal: str | None = None
    contains: str | None = None
    does_not_contain: str | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


class NumberFilterConditions(StrictModel):
    equals: float | None = None
    does_not_equal: float | None = None
    greater_than: float | None = None
    less_than: float | None = None
    greater_than_or_equal_to: float | None = None
    less_than_or_equal_to: float | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


class CheckboxFilterConditions(StrictModel):
    equals: bool | None = None
    does_not_equal: bool | None = None


class SelectFilterConditions(StrictModel):
    """Conditions for select or status properties."""

    equals: str | None = None
    does_not_equal: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


class MultiSelectFilterConditions(StrictModel):
    contains: str | None = None
    does_not_contain: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


class DateFilterConditions(StrictModel):
    """Conditions for date properties (date, created_time, last_edited_time)."""

    equals: str | None = None
    before: str | None = None
    after: str | None = None
    on_or_before: str | None = None
    on_or_after: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None
    past_week: dict[str, Any] | None = None
    past_month: dict[str, Any] | None = None
    past_year: dict[str, Any] | None = None
    this_week: dict[str, Any] | None = None
    next_week: dict[str, Any] | None = None
    next_month: dict[str, Any] | None = None
    next_year: dict[str, Any] | None = None


class PropertyFilter(StrictModel):
    """A property name/ID plus one condition object matching the property's type."""

    property: str = Field(..., description="Name or ID of the property to filter on.")
    title: TextFilterConditions | None = None
    rich_text: TextFilterConditions | None = None
    url: TextFilterConditions | None = None
    email: TextFilterConditions | None = None
    phone_number: TextFilterConditions | None = None
    number: NumberFilterConditions | None = None
    checkbox: CheckboxFilterConditions | None = None
    select: SelectFilterConditions | None = None
    multi_select: MultiSelectFilterConditions | None = None
    status: SelectFilterConditions | None = None
    date: DateFilterConditions | None = None
    created_time: DateFilterConditions | None = None
    last_edited_time: DateFilterConditions | None = None


class DatabaseFilter(BaseModel):
    """Compound filter: property filters combined with either OR or AND."""

    model_config = ConfigDict(populate_by_name=True)

    or_: list[PropertyFilter] | None = Field(
        None, alias="or", max_length=100, description="Property filters combined with OR."
    )
    and_: list[PropertyFilter] | None = Field(
        None, alias="and", max_length=100, description="Property filters combined with AND."
    )

    @model_validator(mode="after")
    def _one_combinator(self) -> "DatabaseFilter":
        if self.or_ is not None and self.and_ is not None:
            raise ValueError(
                "Cannot use both 'or' and 'and' in the same filter object. "
                "Use nested filters for complex logic."
            )
        return self


class DatabaseSort(StrictModel):
    property: str = Field(..., description="The name or ID of the property to sort by.")
    direction: Literal["ascending", "descending"] = Field(..., description="The direction to sort.")


class QueryDatabaseInput(BaseModel):
    """Input schema for notion_post_database_query."""

    database_id: str = Field(..., description="Identifier for a Notion database.")
    filter_properties: list[str] | None = Field(
        None,
        description=(
            "Page property value IDs. Not supported by the database query endpoint; "
            "accepted for compatibility and ignored."
        ),
    )
    filter: DatabaseFilter | None = Field(
        None, description="When supplied, limits which pages are returned."
    )
    sorts: list[DatabaseSort] | None = Field(
        None, description="When supplied, orders the results based on the provided sort criteria."
    )
    start_cursor: str | None = Field(
        None, description="When supplied, returns a page of results starting after the cursor."
    )
    page_size: int | None = Field(
        None, le=100, description="The number of items desired in the response. Maximum: 100."
    )
    archived: bool | None = Field(None, description="Set to true to include archived pages.")
    in_trash: bool | None = Field(None, description="Set to true to include pages in the trash.")


# ============================================================================
# USER SCHEMAS
# ============================================================================


class GetUsersInput(BaseModel):
    """Input schema for notion_get_users."""

    start_cursor: str | None = Field(
        None, description="If supplied, returns a page of results starting after the cursor."
    )
    page_size: int | None = Field(
        None, le=100, description="The number of items desired in the response. Maximum: 100."
    )


class GetUserInput(BaseModel):
    """Input schema for notion_get_user."""

    user_id: str = Field(..., description="The ID of the user to retrieve. This can be a UUID.")


class GetSelfInput(BaseModel):
    """notion_get_self takes no arguments."""


# ============================================================================
# COMMENT SCHEMAS
# ============================================================================


class RetrieveCommentsInput(BaseModel):
    """Input schema for notion_retrieve_a_comment."""

    block_id: str = Field(
        ..., description="Identifier for a Notion block or page (UUID) to retrieve comments from."
    )
    page_size: int | None = Field(
        None, le=100, description="The number of items desired in the response. Maximum: 100."
    )
    start_cursor: str | None = Field(
        None, description="If supplied, returns a page of results starting after the cursor."
    )


class CommentText(BaseModel):
    content: str = Field(..., description="The text content of the comment.")


class CommentRichText(BaseModel):
    text: CommentText


class CreateCommentInput(BaseModel):
    """Input schema for notion_create_a_comment."""

    parent: PageParent = Field(
        ..., description="An object containing the ID of the page that the comment is in."
    )
    rich_text: list[CommentRichText] = Field(
        ...,
        min_length=1,
        description="Rich text objects for the comment's content. Must contain at least one item.",
    )


# ============================================================================
# SEARCH SCHEMAS
# ============================================================================


class SearchSort(BaseModel):
    direction: Literal["ascending", "descending"] | None = None
    timestamp: Literal["last_edited_time"] | None = None


class SearchFilter(BaseModel):
    value: Literal["page", "database"]
    property: Literal["object"]


class SearchInput(BaseModel):
    """Input schema for notion_post_search."""

    query: str = Field(
        ..., description="The text to search for in Notion page and database titles."
    )
    sort: SearchSort | None = Field(
        None, description='Sort criteria. Only "last_edited_time" is supported for timestamp.'
    )
    filter: SearchFilter | None = Field(
        None,
        description='Limit results to either pages or databases. Property must be "object".',
    )
    start_cursor: str | None = Field(
        None, description="Cursor for pagination, obtained from a previous response."
    )
    page_size: int | None = Field(
        None, le=100, description="Number of items per page to return (maximum 100)."
    )
