from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, Company, AccessState


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""
    
    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class CompanySerializer(serializers.ModelSerializer):
    """Company the current user is authorized for."""

    class Meta:
        model = Company
        fields = ['id', 'name', 'email', 'is_active', 'created_at']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Validate registration input."""
    
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    
    class Meta:
        model = User
        fields = ['email', 'password', 'password_confirm', 'display_name']
    
    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""
    
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class AccessStateSerializer(serializers.Serializer):
    """Result of the authorization gate."""

    state = serializers.ChoiceField(choices=AccessState.choices)
    user = UserSerializer(allow_null=True)
    company = CompanySerializer(allow_null=True)
