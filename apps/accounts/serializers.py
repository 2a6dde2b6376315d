from rest_framework import serializers
from .models import User, Plan


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'plan',
            'plan_upgraded_at',
            'created_at',
            'updated_at',
            'last_login',
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Validate input for account creation."""

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)

    def validate(self, attrs):
        """Validate password confirmation when given."""
        confirm = attrs.get('password_confirm')
        if confirm is not None and attrs['password'] != confirm:
            raise serializers.ValidationError({
                'password_confirm': 'As senhas não coincidem.'
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


class DisplayNameUpdateSerializer(serializers.Serializer):
    """Serializer for profile updates."""

    display_name = serializers.CharField(max_length=100, allow_blank=False)


class PlanLimitsSerializer(serializers.Serializer):
    orders = serializers.IntegerField(allow_null=True)
    customers = serializers.IntegerField(allow_null=True)


class PlanUsageSerializer(serializers.Serializer):
    """Plan tier with caps and current usage."""

    plan = serializers.ChoiceField(choices=Plan.choices)
    limits = PlanLimitsSerializer()
    usage = PlanLimitsSerializer()
    upgrade_url = serializers.URLField(allow_null=True)
