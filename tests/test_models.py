import pytest

from ogcard.core.models import FetchFailure, MetaValues, OpenGraph


def make_graph(**pairs) -> OpenGraph:
    values = MetaValues()
    for key, value in pairs.items():
        values.add(key, value)
    return OpenGraph(values)


class TestOpenGraph:
    """Unit tests for the OpenGraph result accessor"""

    def test_get_has_and_keys(self):
        # Arrange
        graph = make_graph(title="Hello", type="website")

        # Act & Assert
        assert graph.get("title") == "Hello"
        assert graph["type"] == "website"
        assert graph.get("missing") is None
        assert graph.has("title")
        assert not graph.has("missing")
        assert set(graph.keys()) == {"title", "type"}

    def test_additional_values_follow_their_key(self):
        """Test repeated values appear as an ordered <key>_additional list."""
        # Arrange
        values = MetaValues()
        values.add("image", "a.jpg")
        values.add("title", "T")
        values.add("image", "b.jpg")
        values.add("image", "c.jpg")

        # Act
        graph = OpenGraph(values)

        # Assert
        assert graph["image"] == "a.jpg"
        assert graph["image_additional"] == ["b.jpg", "c.jpg"]
        assert list(graph) == ["image", "image_additional", "title"]

    def test_set_keeps_additional_values(self):
        values = MetaValues()
        values.add("url", "first")
        values.add("url", "second")
        values.set("url", "replaced")

        graph = OpenGraph(values)

        assert graph["url"] == "replaced"
        assert graph["url_additional"] == ["second"]

    def test_traversal_is_restartable(self):
        """Test iterating twice yields the same ordered keys."""
        graph = make_graph(title="T", description="D", url="U")

        first = list(graph.items())
        second = list(graph.items())

        assert first == second == [("title", "T"), ("description", "D"), ("url", "U")]

    def test_record_is_detached_from_values(self):
        """Test later changes to the store do not leak into a returned record."""
        values = MetaValues()
        values.add("title", "T")
        graph = OpenGraph(values)

        values.add("description", "late")

        assert "description" not in graph

    def test_schema(self):
        assert make_graph(type="restaurant").schema == "business"
        assert make_graph(type="website").schema == "website"
        assert make_graph(type="video").schema is None
        assert make_graph(title="no type").schema is None

    def test_has_location_with_coordinates(self):
        assert make_graph(latitude="51.5", longitude="-0.12").has_location()

    def test_has_location_with_full_address(self):
        graph = make_graph(street_address="1 High St", locality="London", region="Greater London",
                           postal_code="N1 1AA", country_name="UK")

        assert graph.has_location()

    @pytest.mark.parametrize("missing", [
        "street_address", "locality", "region", "postal_code", "country_name",
    ])
    def test_has_location_with_partial_address(self, missing):
        address = dict(street_address="1 High St", locality="London", region="Greater London",
                       postal_code="N1 1AA", country_name="UK")
        del address[missing]

        assert not make_graph(**address).has_location()

    def test_has_location_needs_both_coordinates(self):
        assert not make_graph(latitude="51.5").has_location()

    def test_to_dict_includes_schema(self):
        graph = make_graph(type="website", title="T")

        assert graph.to_dict() == {"type": "website", "title": "T", "schema": "website"}

    def test_literal_companion_tag_keeps_repeated_values(self):
        """Test a tag literally named <key>_additional cannot hide later values of <key>."""
        # Arrange
        values = MetaValues()
        values.add("title", "A")
        values.add("title", "B")
        values.add("title_additional", "literal")

        # Act
        graph = OpenGraph(values)

        # Assert
        assert graph["title"] == "A"
        assert graph["title_additional"] == ["B", "literal"]
        assert list(graph) == ["title", "title_additional"]


def test_fetch_failure_to_dict():
    failure = FetchFailure(http_code=404, message="URL Fetch Error: not found",
                           resolved_url="https://example.com/missing")

    assert failure.to_dict() == {
        "http_code": 404,
        "message": "URL Fetch Error: not found",
        "resolved_url": "https://example.com/missing",
        "status": "error",
    }
