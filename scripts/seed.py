"""Sample-content seeder for local development and demos."""
import asyncio
import argparse
import random
import time
from decimal import Decimal

from sitecms.database import engine, async_session, Base
from sitecms.schemas import (
    BlogPostCreate,
    ContactMessageCreate,
    FaqCreate,
    GalleryItemCreate,
    PageCreate,
    ProductCreate,
    ServiceCreate,
)
from sitecms.services import content_service
from sitecms.store import EntityStore

PAGES = [
    ("beranda", "Beranda"),
    ("tentang-kami", "Tentang Kami"),
    ("layanan", "Layanan"),
    ("produk", "Produk"),
    ("galeri", "Galeri"),
    ("kontak", "Kontak"),
]

SERVICES = ["Consultation", "Design", "Installation", "Maintenance", "Repair", "Training"]
CATEGORIES = ["furniture", "lighting", "decor", "outdoor"]


async def seed(small: bool = False):
    num_products = 5 if small else 60
    num_gallery = 5 if small else 40
    num_posts = 5 if small else 50
    num_faqs = 3 if small else 20
    num_messages = 3 if small else 100

    print(f"Seeding: {len(PAGES)} pages, {len(SERVICES)} services, {num_products} products, "
          f"{num_gallery} gallery items, {num_posts} posts, {num_faqs} FAQs, {num_messages} messages")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        store = EntityStore(session)

        for slug, title in PAGES:
            await content_service.create_page(store, PageCreate(
                slug=slug,
                title=title,
                meta_title=title,
                meta_description=f"{title} page",
                content=f"<h1>{title}</h1>",
            ))
        print(f"  Created {len(PAGES)} pages")

        for i, title in enumerate(SERVICES):
            price = None if i % 3 == 0 else Decimal(random.randint(10, 500) * 10000)
            await content_service.create_service(store, ServiceCreate(
                title=title,
                description=f"Professional {title.lower()} service.",
                price=price,
                order_index=i,
            ))
        print(f"  Created {len(SERVICES)} services")

        for i in range(num_products):
            await content_service.create_product(store, ProductCreate(
                name=f"Product {i}",
                description=f"Description of product {i}.",
                price=Decimal(random.randint(100, 10_000_000)) / 100,
                category=random.choice(CATEGORIES),
                is_featured=random.random() < 0.2,
                is_active=random.random() > 0.1,  # 90% active
            ))
        print(f"  Created {num_products} products")

        for i in range(num_gallery):
            await content_service.create_gallery_item(store, GalleryItemCreate(
                title=f"Photo {i}",
                image_url=f"/media/gallery/{i:03d}.jpg",
                category=random.choice(CATEGORIES),
                order_index=random.randint(0, 10),
            ))
        print(f"  Created {num_gallery} gallery items")

        for i in range(num_posts):
            await content_service.create_blog_post(store, BlogPostCreate(
                title=f"Post {i}: tips for your {random.choice(CATEGORIES)}",
                slug=f"post-{i}",
                excerpt=f"Short summary of post {i}.",
                content=f"This is the full content of post {i}. " * 20,
                is_published=random.random() > 0.2,  # 80% published
            ))
        print(f"  Created {num_posts} blog posts")

        for i in range(num_faqs):
            await content_service.create_faq(store, FaqCreate(
                question=f"Frequently asked question {i}?",
                answer=f"Answer to question {i}.",
                order_index=i,
            ))
        print(f"  Created {num_faqs} FAQs")

        for i in range(num_messages):
            await content_service.create_contact_message(store, ContactMessageCreate(
                name=f"Visitor {i}",
                email=f"visitor{i}@example.com",
                subject="Inquiry",
                message="I would like to know more about your products.",
            ))
        print(f"  Created {num_messages} contact messages")

        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the site content database")
    parser.add_argument("--small", action="store_true", help="Use a minimal dataset")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
