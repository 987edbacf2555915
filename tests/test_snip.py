from sveltefmt.parser import (
    SNIPPED_CONTENT_ATTRIBUTE,
    decode_content,
    encode_content,
    has_snipped_content,
    preprocess,
    snip_tag_content,
    unsnip_content,
)


def test_encode_content_is_utf8_base64() -> None:
    assert encode_content("a") == "YQ=="
    assert decode_content(encode_content("café ✂")) == "café ✂"


def test_snip_moves_body_into_synthetic_attribute() -> None:
    snipped = snip_tag_content("style", '<style lang="scss">p { color: red; }</style>')

    assert snipped == (
        f'<style lang="scss" {SNIPPED_CONTENT_ATTRIBUTE}="{encode_content("p { color: red; }")}"></style>'
    )


def test_snip_is_case_insensitive_and_uses_placeholder() -> None:
    snipped = snip_tag_content("script", "<SCRIPT>let a;</SCRIPT>", "{}")

    assert snipped == f'<script {SNIPPED_CONTENT_ATTRIBUTE}="{encode_content("let a;")}">{{}}</script>'


def test_snip_handles_every_occurrence() -> None:
    snipped = snip_tag_content("style", "<style>a</style><p></p><style>b</style>")

    assert snipped.count(SNIPPED_CONTENT_ATTRIBUTE) == 2
    assert "<p></p>" in snipped


def test_preprocess_snips_style_then_script_and_trims() -> None:
    source = "<script>a</script>\n<style>b</style>\n<p>c</p>\n"

    assert preprocess(source) == (
        f'<script {SNIPPED_CONTENT_ATTRIBUTE}="YQ==">{{}}</script>'
        f'<style {SNIPPED_CONTENT_ATTRIBUTE}="Yg=="></style><p>c</p>'
    )


def test_preprocess_leaves_plain_markup_alone() -> None:
    assert preprocess("  <p>{a}</p>\n") == "<p>{a}</p>"


def test_unsnip_restores_snipped_bodies() -> None:
    comment = f' <script {SNIPPED_CONTENT_ATTRIBUTE}="{encode_content("let a = 1;")}">{{}}</script> '

    assert has_snipped_content(comment) is True
    assert unsnip_content(comment) == " <script>let a = 1;</script> "


def test_unsnip_without_snipped_content_is_identity() -> None:
    assert has_snipped_content(" just a comment ") is False
    assert unsnip_content(" just a comment ") == " just a comment "
