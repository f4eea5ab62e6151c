"""Tests for markup stripping."""

from deeplable.translation import strip_tags


class TestStripTags:
    """Tests for strip_tags."""

    def test_plain_text_unchanged(self):
        """Test text without markup is returned as-is."""
        assert strip_tags("Tom & Jerry") == "Tom & Jerry"

    def test_disallowed_tag_removed_content_kept(self):
        """Test a script tag is removed but its text stays."""
        result = strip_tags("<script>alert(1)</script><p>Hello</p>")

        assert "<script>" not in result
        assert "</script>" not in result
        assert result == "alert(1)<p>Hello</p>"

    def test_allowed_tags_preserved(self):
        """Test formatting tags on the allow-list survive."""
        text = "<h2>Title</h2><div><span>a</span> <strong>b</strong> <b>c</b></div>"

        assert strip_tags(text) == text

    def test_attributes_on_allowed_tags_kept(self):
        """Test attributes of allowed tags are not touched."""
        assert strip_tags('<p class="lead">Hi</p>') == '<p class="lead">Hi</p>'

    def test_nested_disallowed_tags(self):
        """Test disallowed tags inside allowed ones are unwrapped."""
        result = strip_tags('<p>Read <a href="/x">the <em>docs</em></a></p>')

        assert result == "<p>Read the docs</p>"

    def test_comments_removed(self):
        """Test HTML comments are dropped."""
        assert strip_tags("<p>Hi<!-- note --></p>") == "<p>Hi</p>"

    def test_uppercase_tags_allowed(self):
        """Test tag names are matched case-insensitively."""
        assert strip_tags("<P>Hi</P>") == "<p>Hi</p>"

    def test_custom_allow_list(self):
        """Test a custom allow-list replaces the default."""
        assert strip_tags("<p><i>Hi</i></p>", allowed_tags=["i"]) == "<i>Hi</i>"

    def test_ampersand_between_tags_unchanged(self):
        """Test a bare ampersand isn't escaped when markup is present."""
        assert strip_tags("Fish & chips <b>now</b>") == "Fish & chips <b>now</b>"

    def test_less_than_between_tags_unchanged(self):
        """Test a literal less-than sign isn't escaped."""
        assert strip_tags("a < b <p>x</p>") == "a < b <p>x</p>"

    def test_escaped_markup_stays_text(self):
        """Test escaped tags are not turned into real markup."""
        assert strip_tags("&lt;p&gt; <b>x</b>") == "&lt;p&gt; <b>x</b>"

    def test_entities_unchanged(self):
        """Test named entities are passed through as written."""
        assert strip_tags("Hello&nbsp;<b>x</b>") == "Hello&nbsp;<b>x</b>"

    def test_void_tag_not_self_closed(self):
        """Test a line break keeps its original form."""
        assert strip_tags("Line<br>two") == "Line<br>two"

    def test_ampersand_in_script_content(self):
        """Test text inside a removed script tag isn't escaped."""
        assert strip_tags("<script>a && b</script><p>x</p>") == "a && b<p>x</p>"

    def test_markup_and_plain_paths_agree(self):
        """Test text reads the same with or without surrounding markup."""
        text = "Tom & Jerry &amp; friends"

        assert strip_tags(f"<p>{text}</p>") == f"<p>{strip_tags(text)}</p>"
