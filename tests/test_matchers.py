import pytest

from webtoolbox.models import Record
from webtoolbox.testing import (
    Outbox,
    create_file,
    delete_file,
    deliver,
    have_logged_in_user,
    limit_length_of,
    limit_size_of,
    prevent_mass_assignment_of,
    require_a,
    require_an,
    require_format_of,
    require_inclusion_of,
    require_numericality_of,
    send_an_email,
    send_email,
    send_emails,
    yield_with,
)

from .conftest import bound


@pytest.fixture
def user(user_model):
    return Record(user_model, login="mickey", email="mickey@mouse.com")


class TestExpectation:
    def test_failure_raises_with_the_matcher_message(self, expect, user):
        with pytest.raises(AssertionError, match="to require presence of homepage"):
            expect(user).to(require_a("homepage"))

    def test_negated_failure(self, expect, user):
        with pytest.raises(AssertionError, match="not to require presence of login"):
            expect(user).not_to(require_a("login"))


class TestValidationMatchers:
    def test_require_a(self, expect, user):
        expect(user).to(require_a("login"))
        expect(user).to(require_an("email"))
        expect(user).not_to(require_a("homepage"))
        expect(user).to_not(require_a("login").with_message("is verplicht"))

    def test_limit_size_of(self, expect, user):
        expect(user).to(limit_size_of("login").to((3, 16)))
        expect(user).to(limit_length_of("login").to(range(3, 17)))
        expect(user).not_to(limit_size_of("login").to(10))

    def test_limit_size_of_needs_limits(self, user):
        with pytest.raises(ValueError):
            limit_size_of("login").matches(user)

    def test_require_numericality_of(self, expect, user):
        expect(user).to(require_numericality_of("age"))
        expect(user).not_to(require_numericality_of("login"))

    def test_require_inclusion_of(self, expect, user):
        expect(user).to(require_inclusion_of("rating").in_range(range(1, 6)))
        expect(user).to(require_inclusion_of("rating").in_range((1, 5)))
        expect(user).not_to(require_inclusion_of("rating").in_range((3, 5)))

    def test_require_inclusion_of_needs_a_range(self):
        with pytest.raises(TypeError):
            require_inclusion_of("rating").in_range([1, 2])

    def test_require_format_of(self, expect, user):
        expect(user).to(
            require_format_of("email").to_accept("mickey+stuff@mouse.com").but_reject("mickey.disney")
        )
        expect(user).to(
            require_format_of("homepage")
            .to_accept("http://example.com")
            .and_reject("htt:/example.com")
            .with_message("is ongeldig")
        )
        expect(user).not_to(require_format_of("email").to_reject("mickey.disney").with_message("is fout"))
        expect(user).not_to(require_format_of("email").to_accept("mickey.disney"))

    def test_require_format_of_arguments(self, user):
        with pytest.raises(TypeError):
            require_format_of("email").to_accept(5)
        with pytest.raises(ValueError):
            require_format_of("email").matches(user)


class TestFileMatchers:
    def test_delete_file(self, expect, tmp_path):
        path = tmp_path / "old.txt"
        path.write_text("x")

        expect(path.unlink).to(delete_file(path))

    def test_delete_file_needs_an_existing_file(self, expect, tmp_path):
        with pytest.raises(ValueError):
            expect(lambda: None).to(delete_file(tmp_path / "missing.txt"))

    def test_create_file(self, expect, tmp_path):
        path = tmp_path / "new.txt"
        expect(lambda: path.write_text("x")).to(create_file(path))
        expect(lambda: None).not_to(create_file(tmp_path / "other.txt"))


class TestMailMatchers:
    def test_send_email(self, expect, mail_outbox):
        expect(lambda: deliver("welkom")).to(send_email())
        expect(lambda: deliver("welkom")).to(send_an_email())
        expect(lambda: None).not_to(send_email())

    def test_send_emails_counts(self, expect, mail_outbox):
        def spam():
            for n in range(3):
                deliver(f"bericht {n}")

        expect(spam).to(send_emails(3))
        expect(spam).to(send_emails(range(2, 5)))
        expect(spam).not_to(send_emails(1))
        assert len(mail_outbox) == 3

    def test_own_outbox(self, expect):
        outbox = Outbox()
        expect(lambda: outbox.deliver("x")).to(send_an_email(outbox))

    def test_count_must_make_sense(self):
        with pytest.raises(ValueError):
            send_emails("lots")


class TestRecordMatchers:
    def test_prevent_mass_assignment_of(self, expect, user):
        expect(user).to(prevent_mass_assignment_of("admin"))
        expect(user).not_to(prevent_mass_assignment_of("login"))
        expect(user).to(prevent_mass_assignment_of("admin").with_value(True))

    def test_replacement_must_differ(self, expect, user):
        with pytest.raises(ValueError):
            expect(user).to(prevent_mass_assignment_of("admin").with_value(False))


class TestSessionMatchers:
    def test_have_logged_in_user(self, expect):
        expect(bound(session={"user_id": 1})).to(have_logged_in_user())
        expect(bound(session={})).not_to(have_logged_in_user())

    def test_explains_a_missing_session(self, expect):
        with pytest.raises(AssertionError, match="session is None"):
            expect(bound(session=None)).to(have_logged_in_user())


class TestYieldWith:
    class Guard:
        def __init__(self, admin):
            self.admin = admin

        def only_admin(self, callback):
            if self.admin:
                callback()

    def test_yield_with(self, expect):
        expect(self.Guard(True)).to(yield_with("only_admin"))
        expect(self.Guard(False)).not_to(yield_with("only_admin"))

    def test_method_must_exist(self, expect):
        with pytest.raises(ValueError):
            expect(self.Guard(True)).to(yield_with("missing"))
