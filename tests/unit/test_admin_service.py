"""Unit tests for the administrator service."""

import pytest

from scholar.core import Role
from scholar.core.exceptions import AuthorizationError, RegistryCorruptionError
from scholar.services import AdminService, CourseReport, CourseSummary


class TestAdminCreateCourse:
    """Tests for course creation."""

    def test_create_course(self, admin, registry):
        """Test creation returns the one-based position and stable id."""
        result = admin.create_course("Mathematics", "t1@example.com")
        assert result.success
        assert isinstance(result.data, CourseSummary)
        assert result.data.position == 1
        assert result.data.course_id == registry.get_course(0).course_id
        assert len(registry) == 1

    def test_duplicate_ownership(self, admin, registry):
        """Test an instructor cannot own a second course."""
        admin.create_course("Mathematics", "t1@example.com")
        result = admin.create_course("Statistics", "t1@example.com")
        assert not result.success
        assert result.error_code == "DUPLICATE_OWNERSHIP"
        assert len(registry) == 1

    @pytest.mark.parametrize("name, email", [
        ("", "t1@example.com"),
        ("x" * 101, "t1@example.com"),
        ("Mathematics", "not-an-email"),
    ])
    def test_invalid_input(self, admin, registry, name, email):
        """Test malformed names and emails are refused."""
        result = admin.create_course(name, email)
        assert result.error_code == "VALIDATION_ERROR"
        assert len(registry) == 0

    def test_corrupted_registry_propagates(self, two_courses, registry):
        """Test a broken registry raises out of the service instead of failing softly."""
        registry._courses.append(registry.get_course(0))
        with pytest.raises(RegistryCorruptionError):
            two_courses.create_course("Chemistry", "t3@example.com")

    def test_list_courses_empty(self, admin):
        """Test listing an empty registry."""
        result = admin.list_courses()
        assert result.success
        assert result.data == []

    def test_list_courses(self, two_courses):
        """Test listing reports one-based positions."""
        result = two_courses.list_courses()
        assert [(c.position, c.name) for c in result.data] == [(1, "Mathematics"), (2, "Physics")]


class TestAdminDeleteCourse:
    """Tests for course deletion."""

    def test_delete_shifts_positions(self, two_courses):
        """Test deleting position 1 moves Physics to position 1."""
        result = two_courses.delete_course(1)
        assert result.success
        assert result.message == "Successfully deleted course: Mathematics"
        listing = two_courses.list_courses().data
        assert [(c.position, c.name) for c in listing] == [(1, "Physics")]

    @pytest.mark.parametrize("position", [0, 3, "abc"])
    def test_delete_out_of_range(self, two_courses, registry, position):
        """Test positions outside 1..size are refused without mutation."""
        result = two_courses.delete_course(position)
        assert result.error_code == "INDEX_OUT_OF_RANGE"
        assert "between 1 and 2" in result.message
        assert len(registry) == 2

    def test_delete_frees_instructor(self, two_courses):
        """Test the owner can be given a new course after deletion."""
        two_courses.delete_course(1)
        assert two_courses.create_course("Statistics", "t1@example.com").success


class TestAdminContent:
    """Tests for content editing."""

    def test_add_and_remove_content(self, two_courses, registry):
        """Test one-based content positions."""
        for text in ["Algebra", "Geometry", "Calculus"]:
            assert two_courses.add_content(1, text).success
        result = two_courses.remove_content(1, 2)
        assert result.success
        assert [(c.position, c.text) for c in result.data] == [(1, "Algebra"), (2, "Calculus")]
        assert registry.get_course(0).contents == ("Algebra", "Calculus")

    def test_remove_content_out_of_range(self, two_courses, registry):
        """Test a bad content position leaves content untouched."""
        two_courses.add_content(1, "Algebra")
        result = two_courses.remove_content(1, 2)
        assert result.error_code == "INDEX_OUT_OF_RANGE"
        assert registry.get_course(0).contents == ("Algebra",)

    def test_add_invalid_content(self, two_courses):
        """Test empty content is refused."""
        assert two_courses.add_content(1, "").error_code == "VALIDATION_ERROR"

    def test_view_course(self, two_courses):
        """Test the detail view lists contents and roster."""
        two_courses.add_content(2, "Newton's Laws")
        two_courses.enroll_learner(2, "s1@example.com", "pw")
        detail = two_courses.view_course(2).data
        assert detail.position == 2
        assert [c.text for c in detail.contents] == ["Newton's Laws"]
        assert detail.students == ["s1@example.com"]


class TestAdminEnrollment:
    """Tests for enrolling and removing learners."""

    def test_enroll_creates_account(self, two_courses, directory, registry):
        """Test an unseen email gets a learner account."""
        result = two_courses.enroll_learner(1, "s1@example.com", "pw")
        assert result.success
        assert result.data == {'email': "s1@example.com", 'username': "s1", 'account_created': True}
        assert directory.get("s1@example.com").role is Role.LEARNER
        assert registry.get_course(0).students == ("s1@example.com",)

    def test_enroll_existing_learner(self, two_courses, directory):
        """Test an existing learner is reused for a second course."""
        two_courses.enroll_learner(1, "s1@example.com", "pw")
        result = two_courses.enroll_learner(2, "s1@example.com", "ignored")
        assert result.success
        assert result.data['account_created'] is False
        assert len(directory) == 4

    def test_enroll_twice(self, two_courses, registry):
        """Test enrolling the same learner twice."""
        two_courses.enroll_learner(1, "s1@example.com", "pw")
        result = two_courses.enroll_learner(1, "s1@example.com", "pw")
        assert result.error_code == "ALREADY_ENROLLED"
        assert registry.get_course(0).students == ("s1@example.com",)

    def test_enroll_instructor_email(self, two_courses, registry):
        """Test an email held by another role is a duplicate account."""
        result = two_courses.enroll_learner(1, "t2@example.com", "pw")
        assert result.error_code == "DUPLICATE_ACCOUNT"
        assert registry.get_course(0).students == ()

    def test_enroll_invalid_email(self, two_courses, directory):
        """Test that no account is created for a malformed email."""
        result = two_courses.enroll_learner(1, "student", "pw")
        assert result.error_code == "VALIDATION_ERROR"
        assert len(directory) == 3

    def test_enroll_bad_position(self, two_courses, directory):
        """Test that no account is created for a missing course."""
        result = two_courses.enroll_learner(5, "s1@example.com", "pw")
        assert result.error_code == "INDEX_OUT_OF_RANGE"
        assert "s1@example.com" not in directory

    def test_remove_learner(self, two_courses, registry):
        """Test removing an enrolled learner."""
        two_courses.enroll_learner(1, "s1@example.com", "pw")
        result = two_courses.remove_learner(1, "s1@example.com")
        assert result.success
        assert registry.get_course(0).students == ()

    def test_remove_missing_learner(self, two_courses):
        """Test removing someone who is not on the roster."""
        result = two_courses.remove_learner(1, "s1@example.com")
        assert result.error_code == "NOT_FOUND"


class TestAdminReport:
    """Tests for the aggregate report."""

    def test_empty_report(self, admin):
        """Test the report with no courses."""
        result = admin.view_report()
        assert result.success
        assert result.data == []

    def test_report_covers_every_course(self, two_courses, registry):
        """Test the report lists rosters and grades for all courses."""
        two_courses.enroll_learner(1, "s1@example.com", "pw")
        registry.get_course(0).add_grade("s1@example.com", 87)
        reports = two_courses.view_report().data
        assert all(isinstance(r, CourseReport) for r in reports)
        assert [r.name for r in reports] == ["Mathematics", "Physics"]
        assert reports[0].students == ["s1@example.com"]
        assert [(g.student_email, g.grade) for g in reports[0].grades] == [("s1@example.com", 87)]

    def test_report_matches_course_snapshot(self, two_courses, registry):
        """Test each report entry carries the course's own snapshot fields."""
        course = registry.get_course(1)
        two_courses.enroll_learner(2, "s1@example.com", "pw")
        course.add_grade("s1@example.com", 64)
        snapshot = course.to_dict()
        report = two_courses.view_report().data[1]
        assert report.model_dump() == {
            'course_id': snapshot['course_id'],
            'name': snapshot['name'],
            'instructor_email': snapshot['instructor_email'],
            'students': snapshot['students'],
            'grades': snapshot['grades'],
        }


class TestAdminRole:
    """Tests for role binding."""

    def test_rejects_non_admin(self, registry, directory):
        """Test that an instructor account cannot drive the admin service."""
        with pytest.raises(AuthorizationError) as exc_info:
            AdminService(directory.get("t1@example.com"), registry, directory)
        assert exc_info.value.error_code == "ROLE_MISMATCH"
