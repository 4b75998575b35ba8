#This file is for development purposes only

import logging

from github_client_impl import GitHubError, get_client


def main():
    logging.basicConfig(level=logging.DEBUG)
    print("GitHub issue tracker client")
    client = get_client(interactive=True)

    owner = input("Repository owner: ").strip()
    repo = input("Repository name: ").strip()

    print("\nFetching recent issues...")
    try:
        issues = client.get_list_by_repository(owner, repo, state="open", sort="updated", limit=5)
        for issue in issues:
            print(f"- #{issue['number']} {issue['title']}")
    except GitHubError as e:
        print(f"GitHub answered {e.status_code}: {e.body}")

    try:
        labels = client.get_labels(owner, repo)
        print(f"Labels: {', '.join(label['name'] for label in labels)}")
    except GitHubError as e:
        print(f"GitHub answered {e.status_code}: {e.body}")

if __name__ == "__main__":
    main()
