"""
Integration tests for the vet directory, detail page and JSON resource.
"""

import pytest


@pytest.mark.integration
@pytest.mark.controllers
@pytest.mark.vets
class TestVetDirectory:
    def test_radiology(self, client):
        response = client.get("/vets.html?specialty=radiology")
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert "Helen Leary" in html
        assert "Henry Stevens" in html
        assert "James Carter" not in html
        assert "Linda Douglas" not in html

    def test_surgery(self, client):
        html = client.get("/vets.html?specialty=surgery").get_data(as_text=True)

        assert "Linda Douglas" in html
        assert "Rafael Ortega" in html
        assert "Helen Leary" not in html

    def test_dentistry_redirects_to_the_only_dentist(self, client):
        response = client.get("/vets.html?specialty=dentistry")

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/vets/3")

    def test_none_lists_vets_without_specialties(self, client):
        html = client.get("/vets.html?specialty=none").get_data(as_text=True)

        assert "James Carter" in html
        assert "Sharon Jenkins" in html
        assert "Helen Leary" not in html
        assert '<option value="none" selected>' in html

    def test_unknown_specialty_shows_no_results_message(self, client):
        response = client.get("/vets.html?specialty=cardiology")
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert "No veterinarians found." in html
        assert 'id="vets"' not in html

    def test_unfiltered_listing_is_paginated(self, client):
        first = client.get("/vets.html").get_data(as_text=True)

        assert "James Carter" in first
        assert "Henry Stevens" not in first
        assert 'href="/vets.html?page=2"' in first

        second = client.get("/vets.html?page=2").get_data(as_text=True)
        assert "Henry Stevens" in second
        assert "James Carter" not in second

    def test_specialty_dropdown_lists_known_names(self, client):
        html = client.get("/vets.html?specialty=surgery").get_data(as_text=True)

        for name in ("dentistry", "radiology", "surgery"):
            assert f'<option value="{name}"' in html
        assert '<option value="surgery" selected>' in html

    def test_clear_specialty_link_omits_the_parameter(self, client):
        html = client.get("/vets.html?specialty=surgery").get_data(as_text=True)
        assert 'id="clear-specialty" href="/vets.html"' in html


@pytest.mark.integration
@pytest.mark.controllers
@pytest.mark.vets
class TestVetResources:
    def test_detail(self, client):
        html = client.get("/vets/3").get_data(as_text=True)

        assert "Linda Douglas" in html
        assert "dentistry surgery" in html

    def test_unknown_vet_is_404(self, client):
        assert client.get("/vets/999").status_code == 404

    def test_json_listing(self, client):
        response = client.get("/vets")
        data = response.get_json()

        assert response.status_code == 200
        assert len(data["vetList"]) == 6
        douglas = next(v for v in data["vetList"] if v["lastName"] == "Douglas")
        assert douglas["specialties"] == [{"name": "dentistry"}, {"name": "surgery"}]
        assert douglas["nrOfSpecialties"] == 2
