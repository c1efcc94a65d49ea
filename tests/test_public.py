def test_public_prefers_validated(client, make_org, make_kit):
    org = make_org("org_p", name="Acme")
    make_kit(org, status="drafted", title="Draft")
    live = make_kit(org, status="validated", title="Live", days_old=10)

    res = client.get(f"/public/{org.share_token}")

    assert res.status_code == 200
    body = res.get_json()
    assert body["organization"] == {"id": org.id, "name": "Acme", "orgId": "org_p"}
    assert body["mediaKit"]["id"] == live.id


def test_public_falls_back_to_drafted(client, make_org, make_kit):
    org = make_org("org_p")
    draft = make_kit(org, status="drafted")
    make_kit(org, status="generating")

    assert client.get(f"/public/{org.share_token}").get_json()["mediaKit"]["id"] == draft.id


def test_public_without_kit(client, make_org, make_kit):
    org = make_org("org_p")
    make_kit(org, status="archived")

    assert client.get(f"/public/{org.share_token}").get_json()["mediaKit"] is None


def test_public_unknown_token(client, make_org):
    org = make_org("org_p")
    assert client.get("/public/no-such-token").status_code == 404
    # the organization id is only accepted by the legacy route
    assert client.get(f"/public/{org.id}").status_code == 404
    assert client.get(f"/public-media-kit/{org.id}").status_code == 200


def test_email_data(client, make_org, make_kit):
    org = make_org("org_e", name="Acme")
    make_kit(org, status="validated", title="Acme Press", mdx_page_content="# Hi")

    body = client.get("/email-data/press-kit/org_e").get_json()

    assert body == {
        "companyName": "Acme",
        "status": "validated",
        "title": "Acme Press",
        "pressKitUrl": f"/public/{org.share_token}",
        "content": "# Hi",
        "contentType": "mdx",
    }


def test_email_data_unknown_org(client):
    body = client.get("/email-data/press-kit/org_missing").get_json()
    assert set(body.values()) == {None}
