"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 1 print shop (company) with its owner account
- 1 signed-up account without access (to see the subscription gate)
- Products (unit and m²) and services
- Clients
- Quotes in different payment and production stages
- A sale converted from a quote and a direct counter sale
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal

from apps.accounts.models import User, Company
from apps.catalog.models import Product, Service
from apps.clients.models import Client
from apps.quotes.services import (
    create_quote,
    add_payment,
    convert_quote_to_sale,
    set_quote_production_status,
)
from apps.sales.services import create_sale

SHOP_EMAIL = 'grafica@example.com'
STRANGER_EMAIL = 'visitante@example.com'


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Remove the sample company and accounts before creating them again',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing sample data...')
            self.clear_data()

        if Company.objects.filter(email=SHOP_EMAIL).exists():
            self.stdout.write(self.style.WARNING(
                'Sample data already exists. Use --clear to recreate it.'
            ))
            return

        self.stdout.write('Creating sample data...')

        company = self.create_accounts()
        catalog = self.create_catalog(company)
        clients = self.create_clients(company)
        self.create_orders(company, catalog, clients)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write(f'  {SHOP_EMAIL} / password123 (authorized)')
        self.stdout.write(f'  {STRANGER_EMAIL} / password123 (no subscription)')

    def clear_data(self):
        # Business records cascade from the company
        Company.objects.filter(email=SHOP_EMAIL).delete()
        User.objects.filter(email__in=[SHOP_EMAIL, STRANGER_EMAIL]).delete()

    def create_accounts(self):
        self.stdout.write('  Creating accounts...')

        company = Company.objects.create(name='Gráfica Exemplo', email=SHOP_EMAIL)

        for email, name in ((SHOP_EMAIL, 'Gráfica Exemplo'), (STRANGER_EMAIL, 'Visitante')):
            user, _ = User.objects.get_or_create(email=email, defaults={'display_name': name})
            user.set_password('password123')
            user.save()

        return company

    def create_catalog(self, company):
        self.stdout.write('  Creating catalog...')

        products = [
            ('banner', 'Banner em lona', 'Comunicação visual', Decimal('45.00'), 'm2'),
            ('adesivo', 'Adesivo vinil', 'Comunicação visual', Decimal('60.00'), 'm2'),
            ('cartao', 'Cartão de visita (milheiro)', 'Papelaria', Decimal('90.00'), 'unit'),
            ('panfleto', 'Panfleto A5 (cento)', 'Papelaria', Decimal('30.00'), 'unit'),
        ]
        catalog = {}
        for key, name, category, price, unit in products:
            catalog[key] = Product.objects.create(
                company=company,
                name=name,
                category=category,
                price=price,
                measurement_unit=unit,
            )

        catalog['arte'] = Service.objects.create(
            company=company, name='Criação de arte', price=Decimal('80.00'), duration='2 dias'
        )
        catalog['instalacao'] = Service.objects.create(
            company=company, name='Instalação', price=Decimal('120.00'), duration='1 dia'
        )
        return catalog

    def create_clients(self, company):
        self.stdout.write('  Creating clients...')

        people = [
            ('Maria Silva', '(11) 98765-4321', 'maria@example.com'),
            ('Padaria Pão Quente', '(11) 3456-7890', ''),
            ('João Pereira', '(21) 99876-5432', 'joao@example.com'),
        ]
        return [
            Client.objects.create(company=company, name=name, phone=phone, email=email)
            for name, phone, email in people
        ]

    def create_orders(self, company, catalog, clients):
        self.stdout.write('  Creating quotes and sales...')

        maria, padaria, joao = clients

        # Pending quote, no payment yet
        create_quote(
            company=company,
            client_id=maria.id,
            items=[
                {'product': catalog['cartao'].id, 'quantity': Decimal('2')},
                {'service': catalog['arte'].id, 'quantity': Decimal('1')},
            ],
        )

        # Facade banner with a deposit, in production
        facade = create_quote(
            company=company,
            client_id=padaria.id,
            items=[
                {'product': catalog['banner'].id, 'width': Decimal('3'), 'height': Decimal('1.5')},
                {'service': catalog['instalacao'].id, 'quantity': Decimal('1')},
            ],
            notes='Fachada da loja',
        )
        add_payment(company=company, quote_id=facade.id, amount=Decimal('150.00'), method='pix')
        set_quote_production_status(company=company, quote_id=facade.id, production_status='in_production')

        # Fully paid flyers, converted into a sale and ready for pickup
        flyers = create_quote(
            company=company,
            client_id=joao.id,
            items=[{'product': catalog['panfleto'].id, 'quantity': Decimal('5')}],
        )
        add_payment(company=company, quote_id=flyers.id, amount=flyers.total, method='credit')
        set_quote_production_status(company=company, quote_id=flyers.id, production_status='ready')
        convert_quote_to_sale(company=company, quote_id=flyers.id, payment_method='credit')

        # Walk-in counter sale
        create_sale(
            company=company,
            client_name='Cliente balcão',
            payment_method='cash',
            status='paid',
            items=[{'product': catalog['adesivo'].id, 'width': Decimal('0.5'), 'height': Decimal('0.5')}],
        )
