"""
Unit tests for core value objects.
"""
import pytest

from core.domain.value_objects import ActingUser, Email, PhoneNumber, UserRole


class TestEmail:
    """Tests for Email value object."""

    def test_valid_email(self):
        """Test valid email creation."""
        email = Email("test@example.com")
        assert str(email) == "test@example.com"
        assert email.value == "test@example.com"

    def test_invalid_email_no_at(self):
        """Test invalid email without @."""
        with pytest.raises(ValueError, match="Invalid email"):
            Email("invalid-email")

    def test_invalid_email_empty(self):
        """Test invalid empty email."""
        with pytest.raises(ValueError, match="Invalid email"):
            Email("")

    @pytest.mark.parametrize("value", ["a..b@x.com", "a@x..com", "a b@x.com"])
    def test_invalid_email_rejected_by_email_field_rules(self, value):
        """Test addresses the supplier email column would refuse."""
        with pytest.raises(ValueError, match="Invalid email"):
            Email(value)

    def test_invalid_email_too_long(self):
        """Test emails longer than 100 characters."""
        with pytest.raises(ValueError, match="too long"):
            Email("a" * 95 + "@example.com")

    def test_equality(self):
        """Test emails compare by value."""
        assert Email("a@x.com") == Email("a@x.com")
        assert Email("a@x.com") != Email("A@x.com")


class TestPhoneNumber:
    """Tests for PhoneNumber value object."""

    def test_valid_phone(self):
        """Test a ten character phone number."""
        assert str(PhoneNumber("1234567890")) == "1234567890"

    @pytest.mark.parametrize("value", ["", "123456789", "12345678901"])
    def test_invalid_length(self, value):
        """Test anything but ten characters is rejected."""
        with pytest.raises(ValueError, match="exactly 10"):
            PhoneNumber(value)


class TestActingUser:
    """Tests for ActingUser value object."""

    def test_default_role(self):
        """Test the default role is manager."""
        user = ActingUser(user_id=3, username="jane")
        assert user.role == UserRole.MANAGER
        assert str(user) == "jane (manager)"

    def test_role_from_string(self):
        """Test roles are looked up by stored value."""
        assert UserRole("admin") is UserRole.ADMIN
        assert str(UserRole.VIEWER) == "viewer"
