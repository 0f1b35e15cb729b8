"""
Company Backend — Employee Photo Tests
=======================================

What:  PhotoService validation plus the upload → /Photos round trip.
"""

import pytest

from company_backend.exceptions import ValidationError
from company_backend.services.photo_service import PhotoService

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00" * 16


class TestPhotoValidation:

    def setup_method(self):
        self.service = PhotoService()

    def test_allowed_extensions(self):
        for name in ("a.png", "a.jpg", "a.jpeg", "a.gif", "a.JPG"):
            self.service.validate_extension(name)

    def test_rejected_extensions(self):
        for name in ("notes.pdf", "malware.exe", "noextension"):
            with pytest.raises(ValidationError, match="not supported"):
                self.service.validate_extension(name)

    def test_directory_parts_stripped(self):
        assert self.service.safe_filename("../../etc/jane.png") == "jane.png"
        assert self.service.safe_filename("C:\\fakepath\\jane.png") == "jane.png"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            self.service.safe_filename("")
        with pytest.raises(ValidationError):
            self.service.safe_filename("..")

    def test_empty_file_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            self.service.validate_size(0)

    def test_oversized_file_rejected(self):
        from company_backend.config import settings

        with pytest.raises(ValidationError, match="exceeds maximum"):
            self.service.validate_size(settings.max_photo_size + 1)


class TestPhotoStorage:

    @pytest.mark.asyncio
    async def test_save_writes_into_photos_dir(self, tmp_path):
        service = PhotoService(photos_dir=str(tmp_path))

        name = await service.save_photo("sub/dir/jane.png", PNG_BYTES)

        assert name == "jane.png"
        assert (tmp_path / "jane.png").read_bytes() == PNG_BYTES


class TestPhotoEndpoints:

    @pytest.mark.asyncio
    async def test_upload_then_serve(self, test_client, photos_dir):
        response = await test_client.post(
            "/api/employee/savefile",
            files={"file": ("omar.png", PNG_BYTES, "image/png")},
        )

        assert response.status_code == 200
        assert response.json() == "omar.png"
        assert (photos_dir / "omar.png").exists()

        served = await test_client.get("/Photos/omar.png")
        assert served.status_code == 200
        assert served.content == PNG_BYTES

    @pytest.mark.asyncio
    async def test_missing_photo_is_404(self, test_client):
        response = await test_client.get("/Photos/does-not-exist.png")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_bad_extension_is_400(self, test_client):
        response = await test_client.post(
            "/api/employee/savefile",
            files={"file": ("script.exe", b"MZ", "application/octet-stream")},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["field"] == "file"
