#!/usr/bin/env python3
"""
Seed script: creates freelancers, services, clients and bookings via the API (no direct store access).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --freelancers 10 --services-per-freelancer 4 --clients 20
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/api/v1"

CATEGORIES = ["Web Development", "Mobile Development", "Design", "Writing", "Marketing", "Video Editing", "Other"]

TITLES = {
    "Web Development": ["Landing page in React", "WordPress site setup", "REST API in FastAPI"],
    "Mobile Development": ["Flutter MVP", "iOS bug fixing", "Android widget"],
    "Design": ["Logo Design", "Brand identity kit", "Figma UI mockups"],
    "Writing": ["Blog posts", "Technical documentation", "Product descriptions"],
    "Marketing": ["SEO audit", "Ad campaign setup", "Newsletter strategy"],
    "Video Editing": ["YouTube editing", "Short-form reels", "Product demo video"],
    "Other": ["Virtual assistant", "Data entry", "Spreadsheet cleanup"],
}

MESSAGES = ["need by Friday", "Can you start this week?", "Budget is flexible", ""]

SKILLS = ["Python", "React", "Figma", "SEO", "Copywriting", "Premiere", "Flutter", "Illustrator"]


def main():
    ap = argparse.ArgumentParser(description="Seed users, services and bookings via API")
    ap.add_argument("--freelancers", type=int, default=5, help="Number of freelancers to create")
    ap.add_argument("--services-per-freelancer", type=int, default=3, help="Services per freelancer")
    ap.add_argument("--clients", type=int, default=8, help="Number of clients to create")
    ap.add_argument("--bookings-per-client", type=int, default=2, help="Bookings per client")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created_services = []
    created_bookings = []
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:

        def register_or_login(email: str, name: str, user_type: str) -> dict | None:
            r = client.post(
                "/auth/register",
                json={"email": email, "password": "password123", "fullName": name, "userType": user_type},
            )
            if r.status_code == 409:
                # Already exists - login is by email only
                r = client.post("/auth/login", json={"email": email})
            if r.status_code not in (200, 201):
                errors.append(f"Auth {email}: {r.status_code} {r.text[:80]}")
                return None
            return r.json()

        # 1) Freelancers with profiles and services
        print(f"Creating {args.freelancers} freelancers...")
        for i in range(args.freelancers):
            user = register_or_login(f"freelancer{i+1}@example.com", f"Freelancer {i+1}", "freelancer")
            if not user:
                continue
            client.put(
                "/profile",
                json={
                    "fullName": user["fullName"],
                    "bio": "Seeded freelancer profile",
                    "skills": ", ".join(random.sample(SKILLS, 3)),
                    "hourlyRate": random.choice([20, 35, 50, 80]),
                },
            )
            for _ in range(args.services_per_freelancer):
                category = random.choice(CATEGORIES)
                r = client.post(
                    "/services",
                    json={
                        "title": random.choice(TITLES[category]),
                        "description": f"{category} work delivered with care.",
                        "category": category,
                        "price": random.choice([25, 50, 100, 250, 500]),
                        "deliveryDays": random.randint(1, 14),
                    },
                )
                if r.status_code == 201:
                    created_services.append(r.json())
                else:
                    errors.append(f"Service for {user['email']}: {r.status_code}")

        if not created_services:
            print("No services created; skipping bookings.")
        else:
            # 2) Clients booking random services
            print(f"Creating {args.clients} clients with ~{args.bookings_per_client} bookings each...")
            for i in range(args.clients):
                user = register_or_login(f"client{i+1}@example.com", f"Client {i+1}", "client")
                if not user:
                    continue
                for service in random.sample(created_services, min(args.bookings_per_client, len(created_services))):
                    r = client.post(
                        "/bookings",
                        json={"serviceId": service["id"], "message": random.choice(MESSAGES)},
                    )
                    if r.status_code == 201:
                        created_bookings.append(r.json())
                    else:
                        errors.append(f"Booking by {user['email']}: {r.status_code}")

        client.post("/auth/logout")

    print(f"\nDone. Services: {len(created_services)}, Bookings: {len(created_bookings)}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
