"""Serializers for account registration, login and user output."""

from django.db import IntegrityError, transaction
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from accounts.models import Role, User

EMAIL_TAKEN = "This email is already in use"


def normalize_email(value: str) -> str:
    return value.strip().lower()


class RegisterSerializer(serializers.Serializer):
    """Input for user registration."""

    name = serializers.CharField(min_length=2, max_length=100, trim_whitespace=True)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    role = serializers.ChoiceField(choices=Role.choices, default=Role.BUYER)

    def validate_email(self, value: str) -> str:
        email = normalize_email(value)
        if User.objects.filter(email=email).exists():
            raise serializers.ValidationError(EMAIL_TAKEN)
        return email

    def create(self, validated_data) -> User:
        # A concurrent registration can take the email after validation.
        try:
            with transaction.atomic():
                return User.objects.create_user(**validated_data)
        except IntegrityError as exc:
            raise serializers.ValidationError({"email": [EMAIL_TAKEN]}) from exc


class LoginSerializer(TokenObtainPairSerializer):
    """Token pair for an email matched the way registration stored it."""

    def validate(self, attrs):
        attrs[self.username_field] = normalize_email(attrs[self.username_field])
        return super().validate(attrs)


class UserSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
