"""Study export and listing."""

from __future__ import annotations

from pydantic import Field

from ..gateway import FixedId, RequestSpec, ToolParams, ToolSpec, endpoint
from .common import UsernameParams, flag, fmt

CATEGORY = "studies"

_PGN_FLAGS = ("clocks", "comments", "variations", "source", "orientation")


class StudyFlags(ToolParams):
    clocks: bool | None = flag("Include clock comments (server default: true)")
    comments: bool | None = flag("Include analysis and annotator comments (server default: true)")
    variations: bool | None = flag("Include non-mainline moves (server default: true)")
    source: bool | None = flag("Add a Source PGN tag with the study chapter URL")
    orientation: bool | None = flag("Add an Orientation PGN tag with the chapter predefined orientation")


class StudyParams(StudyFlags):
    study_id: FixedId = Field(description="Study ID (8 characters)")


class ChapterParams(StudyParams):
    chapter_id: FixedId = Field(description="Chapter ID (8 characters)")


EXPORT_STUDY_CHAPTER = ToolSpec.define(
    "export_study_chapter", "Export one study chapter in PGN format",
    action="export study chapter", category=CATEGORY, params=ChapterParams,
    build=lambda p: RequestSpec(
        path=endpoint("study", p.study_id, f"{p.chapter_id}.pgn"),
        query=p.pairs(*_PGN_FLAGS),
    ),
    messages={404: fmt("Chapter {chapter_id} of study {study_id} not found")},
)

EXPORT_ALL_STUDY_CHAPTERS = ToolSpec.define(
    "export_all_study_chapters", "Export all chapters of a study in PGN format",
    action="export study chapters", category=CATEGORY, params=StudyParams,
    build=lambda p: RequestSpec(path=endpoint("study", f"{p.study_id}.pgn"), query=p.pairs(*_PGN_FLAGS)),
    messages={404: fmt("Study {study_id} not found")},
)

GET_USER_STUDIES = ToolSpec.define(
    "get_user_studies", "Get metadata of all studies of a user",
    action="get user studies", category=CATEGORY, params=UsernameParams,
    build=lambda p: RequestSpec(path=endpoint("study", "by", p.username)),
    messages={404: fmt("User {username} not found")},
)

TOOLS = (EXPORT_STUDY_CHAPTER, EXPORT_ALL_STUDY_CHAPTERS, GET_USER_STUDIES)
