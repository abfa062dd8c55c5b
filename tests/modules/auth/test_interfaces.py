from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_auth_service_has_interface_methods(self):
        """AuthService should have all IAuthService methods."""
        for method in ["issue_token", "validate_token"]:
            assert hasattr(IAuthService, method)
            assert callable(getattr(AuthService, method))

    def test_instance_satisfies_protocol(self):
        """IAuthService is runtime checkable, so isinstance should work."""
        service = AuthService(secret_key="test-secret")
        assert isinstance(service, IAuthService)
