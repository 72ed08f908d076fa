from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.accounts.dtos import AccountRequestDTO
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.services import AccountService
from modules.customers.dtos import CustomerRequestDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Alice Tan", "alice.tan@example.com", "81234567"),
    ("Benjamin Lim", "ben.lim@example.com", "82345678"),
    ("Chloe Ng", "chloe.ng@example.com", "93456789"),
    ("Daniel Koh", "daniel.koh@example.com", "84567890"),
    ("Evelyn Goh", "evelyn.goh@example.com", "95678901"),
]

SEED_ACCOUNTS = [
    ("Savings", "1 Raffles Place, Singapore 048616"),
    ("Checking", "6 Battery Road, Singapore 049909"),
]


class Command(BaseCommand):
    help = "Seed database with sample customers and accounts."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        customer_repo = CustomerDjangoRepository()
        account_repo = AccountDjangoRepository()
        customer_service = CustomerService(customer_repo, account_repo)
        account_service = AccountService(account_repo, customer_repo)

        customers_created = 0
        accounts_created = 0
        for name, email, mobile_number in SEED_CUSTOMERS:
            existing = customer_repo.get_by_email(email)
            if existing:
                customer_id = existing.customer_id
            elif customer_repo.get_by_mobile_number(mobile_number):
                self.stdout.write(
                    self.style.WARNING(f"Skipping {name}: mobile number already in use")
                )
                continue
            else:
                customer = customer_service.create_customer(
                    CustomerRequestDTO(
                        name=name, email=email, mobile_number=mobile_number
                    )
                )
                customer_id = customer.customer_id
                customers_created += 1

            if account_repo.exists_for_customer(customer_id):
                continue
            for account_type, branch_address in SEED_ACCOUNTS:
                account_service.create_account(
                    AccountRequestDTO(
                        customer_id=customer_id,
                        account_type=account_type,
                        branch_address=branch_address,
                    )
                )
                accounts_created += 1

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={customers_created}, "
                f"accounts={accounts_created}"
            )
        )
