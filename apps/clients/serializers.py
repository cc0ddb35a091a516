import re

from rest_framework import serializers
from .models import Client


class ClientSerializer(serializers.ModelSerializer):
    """Client read/write serializer. Partial updates validate only sent fields."""

    class Meta:
        model = Client
        fields = [
            'id',
            'name',
            'phone',
            'email',
            'address',
            'cpf_cnpj',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name is required')
        return value

    def validate_phone(self, value):
        if not re.sub(r'\D', '', value):
            raise serializers.ValidationError('Phone must contain digits')
        return value.strip()

    def validate_cpf_cnpj(self, value):
        digits = re.sub(r'\D', '', value)
        if digits and len(digits) not in (11, 14):
            raise serializers.ValidationError('CPF must have 11 digits and CNPJ 14')
        return value.strip()
