"""
Integration tests for the transform endpoints
"""

from tests.helpers import coordinate_buffer, from_payload, solid, to_payload


class TestTransformEndpoint:
    """Test POST /api/transform/{operation}"""

    def test_rotate90(self, client):
        payload = to_payload(coordinate_buffer(5, 3))
        response = client.post("/api/transform/rotate90", json={"image": payload})

        assert response.status_code == 200
        data = response.json()
        assert data["format"] == "png"
        assert data["mime_type"] == "image/png"
        assert data["size"] == {"width": 3, "height": 5}
        assert data["processing_time_ms"] >= 1
        assert from_payload(data["image"]).size == (3, 5)

    def test_invert(self, client):
        payload = to_payload(solid(2, 2, (10, 20, 30, 40)))
        response = client.post("/api/transform/invert", json={"image": payload})

        assert response.status_code == 200
        assert from_payload(response.json()["image"]).pixel(0, 0) == (245, 235, 225, 40)

    def test_brighten_with_value(self, client):
        payload = to_payload(solid(2, 2, (250, 0, 100, 255)))
        response = client.post("/api/transform/brighten", json={"image": payload, "value": 10})

        assert response.status_code == 200
        assert from_payload(response.json()["image"]).pixel(1, 1) == (255, 10, 110, 255)

    def test_missing_parameter_returns_400(self, client):
        payload = to_payload(solid(2, 2, (0, 0, 0, 255)))
        response = client.post("/api/transform/blur", json={"image": payload})

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "ValidationError"
        assert "sigma" in body["error"]

    def test_negative_sigma_returns_400(self, client):
        payload = to_payload(solid(2, 2, (0, 0, 0, 255)))
        response = client.post("/api/transform/blur", json={"image": payload, "sigma": -2.0})

        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"

    def test_unknown_operation_returns_422(self, client):
        payload = to_payload(solid(2, 2, (0, 0, 0, 255)))
        response = client.post("/api/transform/posterize", json={"image": payload})

        assert response.status_code == 422

    def test_undecodable_image_returns_400(self, client):
        response = client.post("/api/transform/invert", json={"image": "aGVsbG8gd29ybGQ="})

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "DecodeError"
        assert body["error"].startswith("Failed to load image")

    def test_invalid_base64_returns_400(self, client):
        response = client.post("/api/transform/invert", json={"image": "***"})

        assert response.status_code == 400
        assert response.json()["type"] == "DecodeError"

    def test_jpeg_output(self, client):
        payload = to_payload(solid(8, 8, (200, 10, 10, 255)))
        response = client.post(
            "/api/transform/sepia",
            json={"image": payload, "output": {"format": "jpeg", "compression_level": "best"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["format"] == "jpeg"
        assert data["mime_type"] == "image/jpeg"
        assert (from_payload(data["image"]).alpha == 255).all()


class TestCropSquareEndpoint:
    """Test POST /api/transform/crop-square"""

    def test_crop(self, client):
        payload = to_payload(coordinate_buffer(6, 5))
        response = client.post(
            "/api/transform/crop-square", json={"image": payload, "x": 2, "y": 1, "size": 3}
        )

        assert response.status_code == 200
        out = from_payload(response.json()["image"])
        assert out.size == (3, 3)
        assert out.pixel(0, 0) == (2, 1, 3, 255)

    def test_out_of_bounds_returns_400(self, client):
        payload = to_payload(coordinate_buffer(6, 5))
        response = client.post(
            "/api/transform/crop-square", json={"image": payload, "x": 0, "y": 0, "size": 7}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Crop area exceeds image width: 0 + 7 > 6"
        assert body["details"]["edge"] == "width"

    def test_missing_fields_return_422(self, client):
        payload = to_payload(coordinate_buffer(6, 5))
        response = client.post("/api/transform/crop-square", json={"image": payload})

        assert response.status_code == 422


class TestTransformSchema:
    """Test request model metadata"""

    def test_advisory_ranges_documented(self):
        from schemas import TransformRequest

        assert "-100..100" in TransformRequest.model_fields["value"].description
        assert "-100..100" in TransformRequest.model_fields["factor"].description

    def test_extreme_brightness_accepted(self, client):
        payload = to_payload(solid(1, 1, (10, 20, 30, 255)))
        response = client.post("/api/transform/brighten", json={"image": payload, "value": 2**31 - 1})

        assert response.status_code == 200
        assert from_payload(response.json()["image"]).pixel(0, 0) == (255, 255, 255, 255)
