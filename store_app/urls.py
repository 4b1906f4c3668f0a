from django.urls import path

from . import views

product_urlpatterns = [
    path("product/create-new", views.ProductCreateView.as_view(), name="product-create"),
    path("product/get-all", views.ProductListView.as_view(), name="product-list"),
    path("product/get/<str:product_id>", views.ProductDetailView.as_view(), name="product-detail"),
    path("product/update/<str:product_id>", views.ProductUpdateView.as_view(), name="product-update"),
    path("product/delete/<str:product_id>", views.ProductDeleteView.as_view(), name="product-delete"),
    path("product/get-by-slug/<str:slug>", views.ProductBySlugView.as_view(), name="product-by-slug"),
    path("product/vendor/<str:vendor_id>", views.ProductsByVendorView.as_view(), name="product-by-vendor"),
    path(
        "product/vendor/<str:vendor_id>/top-rated",
        views.TopRatedByVendorView.as_view(),
        name="product-top-rated",
    ),
    path("product/category/<str:category>", views.ProductsByCategoryView.as_view(), name="product-by-category"),
    path("product/featured", views.FeaturedProductsView.as_view(), name="product-featured"),
    path("product/min-discount", views.MinDiscountProductsView.as_view(), name="product-min-discount"),
    path("product/price-range", views.PriceRangeProductsView.as_view(), name="product-price-range"),
]

variant_urlpatterns = [
    path("product/variants/create", views.VariantCreateView.as_view(), name="variant-create"),
    path("product/variants/groups/create", views.VariantGroupCreateView.as_view(), name="variant-group-create"),
    path(
        "product/variants/groups/product/<str:product_id>",
        views.ProductVariantGroupListView.as_view(),
        name="variant-group-list",
    ),
    path("product/variants/product/<str:product_id>", views.ProductVariantListView.as_view(), name="variant-list"),
    path("product/variants/<str:variant_id>", views.VariantDetailView.as_view(), name="variant-detail"),
]

combination_urlpatterns = [
    path("product/combinations/create", views.CombinationCreateView.as_view(), name="combination-create"),
    path(
        "product/combinations/bulk-create",
        views.CombinationBulkCreateView.as_view(),
        name="combination-bulk-create",
    ),
    path("product/combinations/get-all", views.CombinationListView.as_view(), name="combination-list"),
    path(
        "product/combinations/product/<str:product_id>",
        views.ProductCombinationListView.as_view(),
        name="combination-by-parent",
    ),
    path(
        "product/combinations/containing/<str:product_id>",
        views.CombinationsContainingView.as_view(),
        name="combination-containing",
    ),
    path(
        "product/combinations/<str:combination_id>",
        views.CombinationDetailView.as_view(),
        name="combination-detail",
    ),
]

review_urlpatterns = [
    path("product/reviews/create", views.ReviewCreateView.as_view(), name="review-create"),
    path("product/reviews/recent", views.RecentReviewsView.as_view(), name="review-recent"),
    path("product/reviews/bulk-delete", views.ReviewBulkDeleteView.as_view(), name="review-bulk-delete"),
    path(
        "product/reviews/product/<str:product_id>",
        views.ProductReviewListView.as_view(),
        name="review-by-product",
    ),
    path(
        "product/reviews/product/<str:product_id>/stats",
        views.ProductReviewStatsView.as_view(),
        name="review-stats",
    ),
    path("product/reviews/<str:review_id>", views.ReviewDetailView.as_view(), name="review-detail"),
    path("product/reviews/<str:review_id>/like", views.ReviewLikeView.as_view(), name="review-like"),
    path("product/reviews/<str:review_id>/dislike", views.ReviewDislikeView.as_view(), name="review-dislike"),
    path(
        "product/reviews/<str:review_id>/remove-reaction",
        views.ReviewRemoveReactionView.as_view(),
        name="review-remove-reaction",
    ),
    path("product/reviews/<str:review_id>/replies", views.ReviewReplyView.as_view(), name="review-replies"),
]

profile_urlpatterns = [
    path("user/create-profile", views.UserProfileCreateView.as_view(), name="user-create"),
    path("user/get-all-profiles", views.UserProfileListView.as_view(), name="user-list"),
    path("user/get/<str:uuid>", views.UserProfileDetailView.as_view(), name="user-detail"),
    path("user/update/<str:uuid>", views.UserProfileUpdateView.as_view(), name="user-update"),
    path("vendor/register", views.VendorRegisterView.as_view(), name="vendor-register"),
    path("vendor/get/<str:slug>", views.VendorDetailView.as_view(), name="vendor-detail"),
    path("vendor/update/<str:slug>", views.VendorUpdateView.as_view(), name="vendor-update"),
    path("vendor/delete/<str:slug>", views.VendorDeleteView.as_view(), name="vendor-delete"),
]

urlpatterns = (
    product_urlpatterns
    + variant_urlpatterns
    + combination_urlpatterns
    + review_urlpatterns
    + profile_urlpatterns
)
