from .combinations import (
    CombinationBulkCreateView,
    CombinationCreateView,
    CombinationDetailView,
    CombinationListView,
    CombinationsContainingView,
    ProductCombinationListView,
)
from .products import (
    FeaturedProductsView,
    MinDiscountProductsView,
    PriceRangeProductsView,
    ProductBySlugView,
    ProductCreateView,
    ProductDeleteView,
    ProductDetailView,
    ProductListView,
    ProductsByCategoryView,
    ProductsByVendorView,
    ProductUpdateView,
    TopRatedByVendorView,
)
from .profiles import (
    UserProfileCreateView,
    UserProfileDetailView,
    UserProfileListView,
    UserProfileUpdateView,
    VendorDeleteView,
    VendorDetailView,
    VendorRegisterView,
    VendorUpdateView,
)
from .reviews import (
    ProductReviewListView,
    ProductReviewStatsView,
    RecentReviewsView,
    ReviewBulkDeleteView,
    ReviewCreateView,
    ReviewDetailView,
    ReviewDislikeView,
    ReviewLikeView,
    ReviewRemoveReactionView,
    ReviewReplyView,
)
from .variants import (
    ProductVariantGroupListView,
    ProductVariantListView,
    VariantCreateView,
    VariantDetailView,
    VariantGroupCreateView,
)
