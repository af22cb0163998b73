import json

import pytest

from sendgrid_inbound.mail.attachments import (
    attachment_count,
    attachment_info,
    extract_attachments,
)
from sendgrid_inbound.mail.inbound_params import Attachment


class TestAttachmentCount:
    @pytest.mark.parametrize("value,expected", [
        ("2", 2),
        (" 3 ", 3),
        ("0", 0),
        (None, 0),
        ("", 0),
        ("two", 0),
        ("-1", 0),
        ("2.0", 2),
        ("2abc", 2),
        ("+1", 1),
    ])
    def test_parses_count(self, value, expected):
        assert attachment_count(value) == expected


class TestAttachmentInfo:
    def test_decodes_mapping(self):
        info = attachment_info('{"attachment1": {"filename": "a.jpg"}}')
        assert info == {"attachment1": {"filename": "a.jpg"}}

    @pytest.mark.parametrize("value", [None, "", "not json", "[]", "null"])
    def test_unusable_values_yield_empty_mapping(self, value):
        assert attachment_info(value) == {}


class TestExtractAttachments:
    def test_extracts_in_index_order(self, upload_1, upload_2):
        params = {"attachments": "2", "attachment2": upload_2, "attachment1": upload_1}

        attachments = extract_attachments(params)

        assert attachments == [
            Attachment(content=upload_1, filename="photo1.jpg"),
            Attachment(content=upload_2, filename="photo2.jpg"),
        ]

    def test_removes_side_channel_fields(self, upload_1):
        params = {
            "subject": "Hello",
            "attachments": "1",
            "attachment1": upload_1,
            "attachment-info": "{}",
        }

        extract_attachments(params)

        assert params == {"subject": "Hello"}

    def test_filename_from_attachment_info(self, upload_1, upload_2):
        params = {
            "attachments": "2",
            "attachment1": upload_1,
            "attachment2": upload_2,
            "attachment-info": json.dumps({
                "attachment2": {"filename": "sendgrid-filename2.jpg", "name": "photo2.jpg"},
                "attachment1": {"filename": "sendgrid-filename1.jpg", "name": "photo1.jpg"},
            }),
        }

        attachments = extract_attachments(params)

        assert [a.filename for a in attachments] == [
            "sendgrid-filename1.jpg",
            "sendgrid-filename2.jpg",
        ]
        assert attachments[0].content is upload_1
        # the upload itself keeps its name
        assert upload_1.name == "photo1.jpg"

    def test_empty_filename_keeps_upload_name(self, upload_1):
        params = {
            "attachments": "1",
            "attachment1": upload_1,
            "attachment-info": '{"attachment1": {"filename": "", "name": "x.jpg"}}',
        }

        assert extract_attachments(params)[0].filename == "photo1.jpg"

    def test_invalid_attachment_info_keeps_upload_names(self, upload_1):
        params = {"attachments": "1", "attachment1": upload_1, "attachment-info": "{oops"}

        assert extract_attachments(params)[0].filename == "photo1.jpg"
        assert "attachment-info" not in params

    def test_zero_count(self):
        params = {"attachments": "0"}
        assert extract_attachments(params) == []
        assert params == {}

    def test_missing_count_ignores_stray_uploads(self, upload_1):
        params = {"attachment1": upload_1}
        assert extract_attachments(params) == []
        assert params == {"attachment1": upload_1}

    def test_missing_upload_is_skipped(self, upload_2):
        params = {"attachments": "2", "attachment2": upload_2}

        attachments = extract_attachments(params)

        assert attachments == [Attachment(content=upload_2, filename="photo2.jpg")]
