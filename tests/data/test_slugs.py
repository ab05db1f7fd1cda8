from trustreet.data.slugs import ParsedSlug, generate_listing_slug, parse_listing_slug, url_safe


class TestUrlSafe:
    def test_lowercase_and_hyphens(self):
        assert url_safe("123 Main Street") == "123-main-street"

    def test_punctuation_collapses(self):
        assert url_safe("  Apt. #4B, Rear  ") == "apt-4b-rear"


class TestGenerateSlug:
    def test_full_address(self):
        slug = generate_listing_slug("123 Main Street", "Somerville", "TN", "38135")
        assert slug == "123-main-street-somerville-tn-38135"

    def test_empty_parts_skipped(self):
        assert generate_listing_slug("123 Main St", "", "TN", "38135") == "123-main-st-tn-38135"


class TestParseSlug:
    def test_round_trip(self):
        parsed = parse_listing_slug("123-main-street-somerville-tn-38135")
        assert parsed == ParsedSlug(address="123 main street", city="somerville", state="tn", zipcode="38135")

    def test_multi_word_city_spills_into_address(self):
        parsed = parse_listing_slug("123-main-st-new-york-ny-10001")
        assert parsed.city == "york"
        assert parsed.address == "123 main st new"
        assert parsed.zipcode == "10001"

    def test_url_encoded(self):
        parsed = parse_listing_slug("123-main%20st-somerville-tn-38135")
        assert parsed.address == "123 main st"

    def test_too_short(self):
        assert parse_listing_slug("somerville-tn-38135") is None
